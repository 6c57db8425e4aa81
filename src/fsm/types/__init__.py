"""
Exports públicos do módulo fsm/types.

Snapshot das tarefas de startup e registros de transição.
"""

from fsm.types.snapshot import PENDING, BootstrapSnapshot, SessionResolution
from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "PENDING",
    "BootstrapSnapshot",
    "SessionResolution",
    "StateTransition",
    "TransitionResult",
]
