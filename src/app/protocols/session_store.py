"""Protocolo de persistência da sessão local do usuário."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.sessions.models import Preferences, Session


class SessionStoreProtocol(ABC):
    """Contrato de load/save/clear da sessão.

    `load()` devolve None quando não há usuário autenticado; quando há,
    a sessão sempre vem com preferências (padrões criados e persistidos
    no primeiro acesso).
    """

    @abstractmethod
    async def load(self) -> Session | None: ...

    @abstractmethod
    async def save(self, session: Session) -> None: ...

    @abstractmethod
    async def clear(self) -> None: ...

    @abstractmethod
    async def load_preferences(self) -> Preferences: ...

    @abstractmethod
    async def save_preferences(self, preferences: Preferences) -> Preferences: ...
