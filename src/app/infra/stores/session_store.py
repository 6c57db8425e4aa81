"""Store de sessão sobre um store chave-valor.

Layout das chaves (valores JSON):
    currentUser      identidade do usuário autenticado
    userPreferences  preferências (sobrevivem ao logout)
    userAffiliates   cache de afiliações do usuário

Todo acesso passa por um asyncio.Lock: um escritor por vez, leituras
nunca intercaladas com escritas.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.session_store import SessionStoreProtocol
from app.sessions.models import Preferences, Session, default_preferences

if TYPE_CHECKING:
    from app.protocols.key_value_store import KeyValueStoreProtocol

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"
PREFERENCES_KEY = "userPreferences"
AFFILIATES_KEY = "userAffiliates"

# Removidas no logout; preferências ficam
SESSION_KEYS = (CURRENT_USER_KEY, AFFILIATES_KEY)


class KeyValueSessionStore(SessionStoreProtocol):
    """SessionStore persistido em um KeyValueStoreProtocol."""

    def __init__(self, kv_store: KeyValueStoreProtocol) -> None:
        self._kv = kv_store
        self._lock = asyncio.Lock()

    async def load(self) -> Session | None:
        """Restaura a sessão; None se não houver usuário autenticado."""
        async with self._lock:
            user_data = await self._read_json(CURRENT_USER_KEY)
            if not user_data:
                return None
            if not isinstance(user_data, dict):
                logger.warning("session_not_object", extra={"key": CURRENT_USER_KEY})
                return None
            preferences = await self._get_or_create_preferences()
        try:
            session = Session.from_dict(user_data, preferences)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("session_load_error", extra={"error_type": type(exc).__name__})
            return None
        logger.debug("session_loaded", extra={"user_id": session.user_id})
        return session

    async def save(self, session: Session) -> None:
        async with self._lock:
            await self._kv.set(CURRENT_USER_KEY, json.dumps(session.to_dict()))
            await self._kv.set(PREFERENCES_KEY, json.dumps(session.preferences))
        logger.debug("session_saved", extra={"user_id": session.user_id})

    async def clear(self) -> None:
        async with self._lock:
            await self._kv.multi_remove(SESSION_KEYS)
        logger.info("session_cleared")

    async def load_preferences(self) -> Preferences:
        """Lê preferências; cria e persiste os padrões no primeiro acesso."""
        async with self._lock:
            return await self._get_or_create_preferences()

    async def save_preferences(self, preferences: Preferences) -> Preferences:
        """Mescla e persiste preferências alteradas pelo usuário."""
        async with self._lock:
            merged = {**await self._get_or_create_preferences(), **preferences}
            await self._kv.set(PREFERENCES_KEY, json.dumps(merged))
        return merged

    async def _get_or_create_preferences(self) -> Preferences:
        stored = await self._read_json(PREFERENCES_KEY)
        if isinstance(stored, dict) and stored:
            return {str(k): str(v) for k, v in stored.items()}
        preferences = default_preferences()
        await self._kv.set(PREFERENCES_KEY, json.dumps(preferences))
        logger.info("preferences_defaulted")
        return preferences

    async def _read_json(self, key: str) -> Any:
        raw = await self._kv.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("kv_value_not_json", extra={"key": key})
            return None
