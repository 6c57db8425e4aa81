"""Settings da verificação de conectividade feita no startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Mesmo endpoint de alcançabilidade usado pelo NetInfo
DEFAULT_CHECK_URL: str = "https://clients3.google.com/generate_204"


@dataclass(frozen=True)
class ConnectivitySettings:
    """Configurações do probe de conectividade.

    Attributes:
        check_url: URL consultada para confirmar acesso à internet
        timeout_seconds: Tempo máximo da consulta
    """

    check_url: str = DEFAULT_CHECK_URL
    timeout_seconds: float = 5.0

    def validate(self) -> list[str]:
        """Valida configurações de conectividade."""
        errors: list[str] = []

        if not self.check_url:
            errors.append("CONNECTIVITY_CHECK_URL não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("CONNECTIVITY_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> ConnectivitySettings:
    """Carrega ConnectivitySettings de variáveis de ambiente."""
    return ConnectivitySettings(
        check_url=os.getenv("CONNECTIVITY_CHECK_URL", DEFAULT_CHECK_URL),
        timeout_seconds=float(os.getenv("CONNECTIVITY_TIMEOUT_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_connectivity_settings() -> ConnectivitySettings:
    """Retorna instância cacheada de ConnectivitySettings."""
    return _load_from_env()
