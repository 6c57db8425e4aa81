"""
Exports públicos do módulo fsm/rules.

Guards estruturais e gates de prontidão do startup.
"""

from fsm.rules.guards import (
    DEFAULT_GUARDS,
    Guard,
    GuardResult,
    evaluate_guards,
    guard_ready_gate,
    guard_routing_gate,
    guard_same_stage,
    guard_terminal_stage,
    guard_valid_stage,
)

__all__ = [
    "DEFAULT_GUARDS",
    "Guard",
    "GuardResult",
    "evaluate_guards",
    "guard_ready_gate",
    "guard_routing_gate",
    "guard_same_stage",
    "guard_terminal_stage",
    "guard_valid_stage",
]
