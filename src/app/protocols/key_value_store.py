"""Protocolo do store chave-valor durável (opaco para o core)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class KeyValueStoreProtocol(ABC):
    """Contrato mínimo assíncrono de get/set/remove sobre strings."""

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def remove(self, key: str) -> None: ...

    @abstractmethod
    async def multi_remove(self, keys: Iterable[str]) -> None: ...
