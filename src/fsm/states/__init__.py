"""
Exports públicos do módulo fsm/states.

Estados canônicos do startup da aplicação.
"""

from fsm.states.bootstrap import (
    DEFAULT_INITIAL_STAGE,
    TERMINAL_STAGES,
    BootstrapStage,
    is_terminal,
    is_valid_stage,
)

__all__ = [
    "DEFAULT_INITIAL_STAGE",
    "TERMINAL_STAGES",
    "BootstrapStage",
    "is_terminal",
    "is_valid_stage",
]
