"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_session_manager

    # Na inicialização do processo
    initialize_app()
    validate_runtime_settings()

    manager = get_session_manager()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_backend_settings,
    get_base_settings,
    get_connectivity_settings,
    get_session_settings,
)

# Nome do serviço para logs
SERVICE_NAME = "coachlink"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    LOG_LEVEL tem precedência; sem ele, DEBUG=true liga o nível DEBUG.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    default_level = "DEBUG" if base.debug else DEFAULT_LOG_LEVEL
    log_level = os.getenv("LOG_LEVEL", default_level).upper()

    configure_logging(
        level=log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes.

    Configura logging em nível DEBUG sem JSON para facilitar debug.
    """
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"backend: {error}" for error in get_backend_settings().validate())
    errors.extend(f"session: {error}" for error in get_session_settings().validate(base))
    errors.extend(
        f"connectivity: {error}" for error in get_connectivity_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_session_store():
    """Obtém store de sessão (singleton).

    Returns:
        SessionStoreProtocol configurado conforme env
    """
    from app.bootstrap.dependencies import create_session_store
    return create_session_store()


@lru_cache(maxsize=1)
def get_session_manager():
    """Obtém gerenciador de sessão sobre o store singleton."""
    from app.bootstrap.dependencies import create_session_manager
    return create_session_manager(get_session_store())


@lru_cache(maxsize=1)
def get_user_client():
    """Obtém UserClient com logout como hook pós-remoção."""
    from app.bootstrap.dependencies import create_user_client
    return create_user_client(get_session_manager())


@lru_cache(maxsize=1)
def get_affiliation_client():
    from app.bootstrap.dependencies import create_affiliation_client
    return create_affiliation_client()
