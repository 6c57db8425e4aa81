"""Protocolos e contratos dos colaboradores externos do core."""

from .alerts import Alert, AlertPresenterProtocol
from .asset_loader import AssetLoaderProtocol
from .connectivity import ConnectivityProbeProtocol, NetworkState
from .key_value_store import KeyValueStoreProtocol
from .navigator import NavigatorProtocol
from .session_store import SessionStoreProtocol

__all__ = [
    "Alert",
    "AlertPresenterProtocol",
    "AssetLoaderProtocol",
    "ConnectivityProbeProtocol",
    "KeyValueStoreProtocol",
    "NavigatorProtocol",
    "NetworkState",
    "SessionStoreProtocol",
]
