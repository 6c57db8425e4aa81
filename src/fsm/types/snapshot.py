"""
Snapshot do progresso das tarefas paralelas do startup.

A sessão tem três valores possíveis:
    PENDING  -> leitura do store ainda não terminou
    None     -> determinado: não há usuário autenticado
    objeto   -> sessão restaurada

O gate de READY depende dessa distinção: checar só "tem sessão?"
liberaria o roteamento enquanto a leitura ainda está em andamento.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SessionResolution(Enum):
    """Marcador de sessão ainda não determinada."""

    PENDING = "pending"

    def __repr__(self) -> str:
        return "PENDING"


PENDING = SessionResolution.PENDING


@dataclass(slots=True)
class BootstrapSnapshot:
    """
    Estado observável das tarefas de startup.

    Attributes:
        assets_ready: Assets críticos carregados
        session: Sessão restaurada, None (ausente) ou PENDING
    """

    assets_ready: bool = False
    session: Any = PENDING

    @property
    def session_determined(self) -> bool:
        """True quando a leitura da sessão terminou (com ou sem usuário)."""
        return self.session is not PENDING

    @property
    def has_session(self) -> bool:
        return self.session_determined and self.session is not None

    @property
    def is_ready(self) -> bool:
        """Predicado de READY: assets prontos E sessão determinada."""
        return self.assets_ready and self.session_determined

    def to_log_dict(self) -> dict[str, Any]:
        """Representação sem PII (não inclui dados do usuário)."""
        return {
            "assets_ready": self.assets_ready,
            "session_determined": self.session_determined,
            "has_session": self.has_session,
        }
