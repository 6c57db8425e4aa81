"""
Módulo FSM — Máquina de Estados do startup da aplicação.

Governa a passada de bootstrap: INIT → PREPARING → READY →
CHECKING_CONNECTIVITY → LOADING_DEFERRED_ASSETS → ROUTING → NAVIGATED,
com FAILED alcançável de qualquer estado não-terminal.

Estrutura:
    - states/: Estados (BootstrapStage)
    - transitions/: Mapa de transições (VALID_TRANSITIONS)
    - rules/: Guards estruturais e gates de prontidão
    - types/: Snapshot das tarefas e registros de transição
    - manager/: Máquina de estados (BootstrapMachine)
"""

from fsm.manager import BootstrapMachine, create_bootstrap_machine
from fsm.rules import GuardResult, evaluate_guards
from fsm.states import (
    DEFAULT_INITIAL_STAGE,
    TERMINAL_STAGES,
    BootstrapStage,
    is_terminal,
    is_valid_stage,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    PENDING,
    BootstrapSnapshot,
    SessionResolution,
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STAGE",
    "PENDING",
    "TERMINAL_STAGES",
    "VALID_TRANSITIONS",
    "BootstrapMachine",
    "BootstrapSnapshot",
    "BootstrapStage",
    "GuardResult",
    "SessionResolution",
    "StateTransition",
    "TransitionResult",
    "create_bootstrap_machine",
    "evaluate_guards",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_stage",
    "validate_transition_map",
]
