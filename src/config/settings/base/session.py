"""Settings de sessão local do usuário.

Define o backend do store chave-valor onde ficam usuário e preferências.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

SessionStoreBackend = Literal["memory", "redis"]

_VALID_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class SessionSettings:
    """Configurações do store de sessão.

    Attributes:
        store_backend: Backend chave-valor (memory|redis)
        key_prefix: Namespace das chaves no backend durável
    """

    store_backend: SessionStoreBackend = "memory"
    key_prefix: str = "coachlink:"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de sessão.

        Args:
            base: BaseSettings para verificar ambiente e REDIS_URL.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend not in _VALID_BACKENDS:
            errors.append(f"SESSION_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "memory" and not base.is_development:
            errors.append("SESSION_STORE_BACKEND=memory proibido em staging/production")

        if self.store_backend == "redis" and not base.redis_url:
            errors.append("SESSION_STORE_BACKEND=redis requer REDIS_URL configurado")

        return errors


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    backend_str = os.getenv("SESSION_STORE_BACKEND", "memory").lower()
    backend: SessionStoreBackend = (
        backend_str if backend_str in _VALID_BACKENDS else "memory"  # type: ignore[assignment]
    )
    return SessionSettings(
        store_backend=backend,
        key_prefix=os.getenv("SESSION_KEY_PREFIX", "coachlink:"),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
