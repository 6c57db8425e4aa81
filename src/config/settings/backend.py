"""Settings do backend HTTP consumido pelos clientes de recurso.

Cada recurso tem sua própria URL base. URL vazia é um estado válido:
o executor responde com erro de configuração sem tocar a rede.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Orçamento fixo por chamada (segundos)
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 5.0


@dataclass(frozen=True)
class BackendSettings:
    """Configurações do backend remoto.

    Attributes:
        user_api_url: URL base do recurso User (ex: https://host/api/User)
        affiliation_api_url: URL base do recurso Affiliation
        request_timeout_seconds: Orçamento de tempo por requisição
        verify_ssl: Valida certificados TLS
    """

    user_api_url: str = ""
    affiliation_api_url: str = ""
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True

    @property
    def is_configured(self) -> bool:
        """True se ao menos um recurso tem URL configurada."""
        return bool(self.user_api_url or self.affiliation_api_url)

    def validate(self) -> list[str]:
        """Valida configurações do backend.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.user_api_url:
            errors.append("USER_API_URL não configurado")

        if not self.affiliation_api_url:
            errors.append("AFFILIATION_API_URL não configurado")

        for name, url in (
            ("USER_API_URL", self.user_api_url),
            ("AFFILIATION_API_URL", self.affiliation_api_url),
        ):
            if url and not url.startswith(("http://", "https://")):
                errors.append(f"{name} deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("BACKEND_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> BackendSettings:
    """Carrega BackendSettings a partir de variáveis de ambiente."""
    return BackendSettings(
        user_api_url=os.getenv("USER_API_URL", "").rstrip("/"),
        affiliation_api_url=os.getenv("AFFILIATION_API_URL", "").rstrip("/"),
        request_timeout_seconds=float(
            os.getenv(
                "BACKEND_REQUEST_TIMEOUT_SECONDS",
                str(DEFAULT_REQUEST_TIMEOUT_SECONDS),
            )
        ),
        verify_ssl=os.getenv("BACKEND_VERIFY_SSL", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_backend_settings() -> BackendSettings:
    """Retorna instância cacheada de BackendSettings."""
    return _load_from_env()
