"""Gerenciador da sessão local: login, logout e preferências.

Encapsula o store para que telas e clientes de recurso não escrevam
chaves diretamente. O logout também é o hook pós-remoção de conta.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.routes import INTRODUCTION
from app.sessions.models import Preferences, Session, UserIdentity

if TYPE_CHECKING:
    from app.protocols.navigator import NavigatorProtocol
    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


class SessionManager:
    """Operações de ciclo de vida da sessão.

    Args:
        store: Store de sessão
        navigator: Navegador usado no logout (opcional em testes/headless)
    """

    __slots__ = ("_navigator", "_store")

    def __init__(
        self,
        store: SessionStoreProtocol,
        navigator: NavigatorProtocol | None = None,
    ) -> None:
        self._store = store
        self._navigator = navigator

    @property
    def store(self) -> SessionStoreProtocol:
        return self._store

    async def restore(self) -> Session | None:
        """Sessão persistida, ou None se não houver usuário autenticado."""
        return await self._store.load()

    async def sign_in(self, record: dict[str, Any]) -> Session:
        """Cria e persiste a sessão a partir do registro de login/cadastro.

        A imagem base64 do backend vira data URI; a senha é descartada.
        """
        identity = UserIdentity.from_record(record)
        preferences = await self._store.load_preferences()
        session = Session(identity=identity, preferences=preferences)
        await self._store.save(session)
        logger.info("session_signed_in", extra={"user_id": identity.id})
        return session

    async def sign_out(self) -> None:
        """Remove a sessão e volta para a tela de introdução."""
        await self._store.clear()
        if self._navigator is not None:
            self._navigator.replace(INTRODUCTION)
        logger.info("session_signed_out")

    async def update_preferences(self, **changes: str) -> Preferences:
        return await self._store.save_preferences(changes)
