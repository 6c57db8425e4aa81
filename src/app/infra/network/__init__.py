"""Implementações concretas de verificação de rede."""

from app.infra.network.connectivity import HttpConnectivityProbe

__all__ = ["HttpConnectivityProbe"]
