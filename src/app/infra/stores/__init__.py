"""Stores — implementações concretas de persistência local.

Módulos disponíveis:
    - memory_stores: Store chave-valor em memória (desenvolvimento/testes)
    - redis_kv_store: Store chave-valor durável sobre Redis
    - session_store: Sessão do usuário sobre qualquer store chave-valor
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryKeyValueStore
from app.infra.stores.redis_kv_store import RedisKeyValueStore
from app.infra.stores.session_store import (
    AFFILIATES_KEY,
    CURRENT_USER_KEY,
    PREFERENCES_KEY,
    KeyValueSessionStore,
)

__all__ = [
    "AFFILIATES_KEY",
    "CURRENT_USER_KEY",
    "PREFERENCES_KEY",
    "KeyValueSessionStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
]
