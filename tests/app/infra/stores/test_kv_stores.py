"""Testes dos stores chave-valor (memória e Redis)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from app.infra.stores import MemoryKeyValueStore, RedisKeyValueStore
from utils.errors import InfrastructureError, StoreUnavailableError


class TestMemoryKeyValueStore:
    @pytest.mark.asyncio
    async def test_get_set_remove(self) -> None:
        store = MemoryKeyValueStore({"a": "1"})

        assert await store.get("a") == "1"
        assert await store.get("missing") is None

        await store.set("b", "2")
        await store.remove("a")
        await store.remove("never-existed")

        assert store.snapshot() == {"b": "2"}

    @pytest.mark.asyncio
    async def test_multi_remove(self) -> None:
        store = MemoryKeyValueStore({"a": "1", "b": "2", "c": "3"})

        await store.multi_remove(["a", "c", "zzz"])

        assert store.snapshot() == {"b": "2"}

    def test_initial_dict_is_copied(self) -> None:
        initial = {"a": "1"}
        store = MemoryKeyValueStore(initial)
        initial["a"] = "changed"
        assert store.snapshot() == {"a": "1"}


@pytest.fixture
def mock_redis() -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock()
    client.delete = AsyncMock()
    return client


class TestRedisKeyValueStore:
    @pytest.mark.asyncio
    async def test_keys_are_prefixed(self, mock_redis: AsyncMock) -> None:
        store = RedisKeyValueStore(mock_redis, key_prefix="test:")

        await store.set("currentUser", "{}")
        await store.get("currentUser")

        mock_redis.set.assert_awaited_once_with("test:currentUser", "{}")
        mock_redis.get.assert_awaited_once_with("test:currentUser")

    @pytest.mark.asyncio
    async def test_bytes_are_decoded(self, mock_redis: AsyncMock) -> None:
        mock_redis.get.return_value = b'{"id": "u1"}'
        store = RedisKeyValueStore(mock_redis)

        assert await store.get("currentUser") == '{"id": "u1"}'

    @pytest.mark.asyncio
    async def test_multi_remove_deletes_in_one_call(self, mock_redis: AsyncMock) -> None:
        store = RedisKeyValueStore(mock_redis)

        await store.multi_remove(["currentUser", "userAffiliates"])
        await store.multi_remove([])

        mock_redis.delete.assert_awaited_once_with(
            "coachlink:currentUser", "coachlink:userAffiliates"
        )

    @pytest.mark.asyncio
    async def test_remove_delegates_to_delete(self, mock_redis: AsyncMock) -> None:
        await RedisKeyValueStore(mock_redis).remove("userPreferences")
        mock_redis.delete.assert_awaited_once_with("coachlink:userPreferences")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["get", "set", "delete"])
    async def test_client_errors_are_wrapped(
        self, mock_redis: AsyncMock, operation: str
    ) -> None:
        getattr(mock_redis, operation).side_effect = ConnectionError("refused")
        store = RedisKeyValueStore(mock_redis)

        with pytest.raises(StoreUnavailableError) as exc_info:
            if operation == "get":
                await store.get("k")
            elif operation == "set":
                await store.set("k", "v")
            else:
                await store.remove("k")

        assert isinstance(exc_info.value, InfrastructureError)
        assert isinstance(exc_info.value.__cause__, ConnectionError)
