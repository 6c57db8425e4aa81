"""Store chave-valor em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.protocols.key_value_store import KeyValueStoreProtocol


class MemoryKeyValueStore(KeyValueStoreProtocol):
    """Store chave-valor em memória — apenas para dev/test."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._store.get(key)

    async def set(self, key: str, value: str) -> None:
        self._store[key] = value

    async def remove(self, key: str) -> None:
        self._store.pop(key, None)

    async def multi_remove(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._store.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Cópia do conteúdo (apenas para testes)."""
        return dict(self._store)
