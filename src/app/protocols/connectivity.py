"""Protocolo do probe de conectividade consultado no startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class NetworkState:
    """Estado de rede reportado pelo probe.

    Attributes:
        connected: Existe interface de rede ativa
        internet_reachable: A internet responde (None = desconhecido)
    """

    connected: bool
    internet_reachable: bool | None = None

    @property
    def has_internet(self) -> bool:
        """Conectado E alcançável; desconhecido conta como sem internet."""
        return bool(self.connected and self.internet_reachable)


class ConnectivityProbeProtocol(Protocol):
    """Contrato mínimo do probe de rede."""

    async def check(self) -> NetworkState: ...
