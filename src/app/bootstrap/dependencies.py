"""Factories de dependências — criação de implementações concretas.

Centraliza a escolha das implementações a partir das settings de
ambiente. Cada factory aceita overrides para que testes e o entrypoint
headless injetem colaboradores próprios.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from api.connectors.backend import (
    AffiliationClient,
    HttpClientConfig,
    RequestExecutor,
    UserClient,
)
from app.bootstrap.clients import create_async_redis_client
from app.coordinators.startup import BootstrapSequencer
from app.infra.network import HttpConnectivityProbe
from app.infra.stores import KeyValueSessionStore, MemoryKeyValueStore, RedisKeyValueStore
from app.sessions import SessionManager
from config.settings import (
    get_backend_settings,
    get_base_settings,
    get_connectivity_settings,
    get_session_settings,
)

if TYPE_CHECKING:
    import httpx

    from app.protocols import (
        AlertPresenterProtocol,
        AssetLoaderProtocol,
        ConnectivityProbeProtocol,
        KeyValueStoreProtocol,
        NavigatorProtocol,
        SessionStoreProtocol,
    )
    from config.settings import BackendSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Session
# ──────────────────────────────────────────────────────────────────────────────


def create_kv_store() -> KeyValueStoreProtocol:
    """Cria store chave-valor baseado na configuração.

    Lê SESSION_STORE_BACKEND:
    - "memory": MemoryKeyValueStore (dev only)
    - "redis": RedisKeyValueStore sobre redis.asyncio

    Returns:
        Implementação de KeyValueStoreProtocol
    """
    settings = get_session_settings()

    if settings.store_backend == "redis":
        store: KeyValueStoreProtocol = RedisKeyValueStore(
            create_async_redis_client(), key_prefix=settings.key_prefix
        )
        logger.info("kv_store_created", extra={"backend": "redis"})
        return store

    environment = get_base_settings().environment
    if environment != "development":
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": environment},
        )
    logger.info("kv_store_created", extra={"backend": "memory"})
    return MemoryKeyValueStore()


def create_session_store(
    kv_store: KeyValueStoreProtocol | None = None,
) -> SessionStoreProtocol:
    return KeyValueSessionStore(kv_store or create_kv_store())


def create_session_manager(
    store: SessionStoreProtocol | None = None,
    navigator: NavigatorProtocol | None = None,
) -> SessionManager:
    return SessionManager(store or create_session_store(), navigator)


# ──────────────────────────────────────────────────────────────────────────────
# Backend clients
# ──────────────────────────────────────────────────────────────────────────────


def _executor_for(
    base_url: str,
    settings: BackendSettings,
    transport: httpx.AsyncBaseTransport | None,
) -> RequestExecutor:
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        verify_ssl=settings.verify_ssl,
    )
    return RequestExecutor(base_url, config=config, transport=transport)


def create_user_client(
    session_manager: SessionManager | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UserClient:
    """Cria UserClient; o hook pós-remoção é o logout da sessão local."""
    settings = get_backend_settings()
    hook = session_manager.sign_out if session_manager is not None else None
    return UserClient(
        _executor_for(settings.user_api_url, settings, transport),
        on_account_removed=hook,
    )


def create_affiliation_client(
    transport: httpx.AsyncBaseTransport | None = None,
) -> AffiliationClient:
    settings = get_backend_settings()
    return AffiliationClient(
        _executor_for(settings.affiliation_api_url, settings, transport)
    )


# ──────────────────────────────────────────────────────────────────────────────
# Startup
# ──────────────────────────────────────────────────────────────────────────────


def create_connectivity_probe() -> ConnectivityProbeProtocol:
    settings = get_connectivity_settings()
    return HttpConnectivityProbe(
        check_url=settings.check_url,
        timeout_seconds=settings.timeout_seconds,
    )


def create_sequencer(
    *,
    navigator: NavigatorProtocol,
    alerts: AlertPresenterProtocol,
    asset_loader: AssetLoaderProtocol,
    critical_assets: Sequence[str] = (),
    non_critical_assets: Sequence[str] = (),
    session_store: SessionStoreProtocol | None = None,
    connectivity_probe: ConnectivityProbeProtocol | None = None,
) -> BootstrapSequencer:
    """Monta o sequenciador de startup com as dependências configuradas."""
    return BootstrapSequencer(
        session_store=session_store or create_session_store(),
        asset_loader=asset_loader,
        connectivity_probe=connectivity_probe or create_connectivity_probe(),
        navigator=navigator,
        alerts=alerts,
        critical_assets=critical_assets,
        non_critical_assets=non_critical_assets,
    )
