"""Exceções compartilhadas: falhas de infraestrutura e de inicialização."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class StoreUnavailableError(InfrastructureError):
    """Falha de conexão/timeout ao acessar o store chave-valor."""


class BootstrapError(RuntimeError):
    """Falha no caminho crítico do startup.

    A mensagem é exibida ao usuário no alerta de falha, sem alteração.
    """


class AssetLoadError(BootstrapError):
    """Falha ao carregar assets críticos ou não-críticos."""


class NoInternetError(BootstrapError):
    """Dispositivo sem conexão ou sem alcance à internet."""

    def __init__(self, message: str = "No internet connection!") -> None:
        super().__init__(message)
