"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AssetLoadError,
    BootstrapError,
    InfrastructureError,
    NoInternetError,
    StoreUnavailableError,
)

__all__ = [
    "AssetLoadError",
    "BootstrapError",
    "InfrastructureError",
    "NoInternetError",
    "StoreUnavailableError",
]
