"""Protocolo de navegação entre telas (opaco para o core)."""

from __future__ import annotations

from typing import Protocol


class NavigatorProtocol(Protocol):
    """Troca de tela e dicas de prefetch.

    Ambos são fire-and-forget: o core nunca aguarda a navegação.
    """

    def replace(self, route: str) -> None: ...

    def prefetch(self, route: str) -> None: ...
