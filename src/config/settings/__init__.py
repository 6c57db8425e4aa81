"""Agregador de settings do Coachlink.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.backend import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    BackendSettings,
    get_backend_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    SessionSettings,
    SessionStoreBackend,
    get_base_settings,
    get_session_settings,
)
from config.settings.connectivity import (
    DEFAULT_CHECK_URL,
    ConnectivitySettings,
    get_connectivity_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CHECK_URL",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    # Backend
    "BackendSettings",
    # Base
    "BaseSettings",
    "ConnectivitySettings",
    "Environment",
    "SessionSettings",
    "SessionStoreBackend",
    "get_backend_settings",
    "get_base_settings",
    "get_connectivity_settings",
    "get_session_settings",
]
