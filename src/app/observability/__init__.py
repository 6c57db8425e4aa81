"""Observabilidade — correlation id injetado nos logs estruturados.

Uso:
    from app.observability import bind_correlation_id, get_correlation_id
"""

from app.observability.correlation import (
    bind_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "bind_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
