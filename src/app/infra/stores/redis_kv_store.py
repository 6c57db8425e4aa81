"""Redis Key-Value Store — backend durável do store de sessão.

Chaves ganham um namespace (ex: "coachlink:currentUser") para permitir
compartilhar a instância Redis.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from app.protocols.key_value_store import KeyValueStoreProtocol
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "coachlink:"


class RedisKeyValueStore(KeyValueStoreProtocol):
    """Store chave-valor sobre redis.asyncio.

    Falhas do cliente Redis sobem como StoreUnavailableError.

    Args:
        redis_client: Cliente Redis assíncrono
        key_prefix: Namespace das chaves
    """

    def __init__(
        self,
        redis_client: AsyncRedis,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        try:
            data = await self._redis.get(self._key(key))
        except Exception as exc:
            raise StoreUnavailableError("Falha ao ler chave no Redis") from exc
        if data is None:
            return None
        return data.decode("utf-8") if isinstance(data, bytes) else str(data)

    async def set(self, key: str, value: str) -> None:
        try:
            await self._redis.set(self._key(key), value)
        except Exception as exc:
            raise StoreUnavailableError("Falha ao gravar chave no Redis") from exc
        logger.debug("kv_key_saved", extra={"key": key})

    async def remove(self, key: str) -> None:
        await self.multi_remove([key])

    async def multi_remove(self, keys: Iterable[str]) -> None:
        redis_keys = [self._key(key) for key in keys]
        if not redis_keys:
            return
        try:
            await self._redis.delete(*redis_keys)
        except Exception as exc:
            raise StoreUnavailableError("Falha ao remover chaves no Redis") from exc
        logger.debug("kv_keys_removed", extra={"count": len(redis_keys)})
