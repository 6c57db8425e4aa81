"""
Máquina de estados (BootstrapMachine) de uma passada de startup.

Valida cada transição contra o mapa e os guards, e mantém histórico
para logs e para o resultado devolvido ao caller.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.bootstrap import (
    DEFAULT_INITIAL_STAGE,
    BootstrapStage,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.snapshot import BootstrapSnapshot
from fsm.types.transition import StateTransition, TransitionResult


class BootstrapMachine:
    """
    Máquina de estados do sequenciador de startup.

    Attributes:
        current_stage: Estado atual
        history: Transições realizadas
        launch_id: Identificador da passada (correlation_id dos logs)
    """

    __slots__ = ("_current_stage", "_history", "_launch_id")

    def __init__(
        self,
        initial_stage: BootstrapStage | None = None,
        launch_id: str = "",
    ) -> None:
        self._current_stage = initial_stage or DEFAULT_INITIAL_STAGE
        self._history: list[StateTransition] = []
        self._launch_id = launch_id

    @property
    def current_stage(self) -> BootstrapStage:
        return self._current_stage

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def launch_id(self) -> str:
        return self._launch_id

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_stage)

    def can_transition_to(
        self,
        target: BootstrapStage,
        snapshot: BootstrapSnapshot | None = None,
    ) -> bool:
        """Verifica mapa e guards sem alterar o estado."""
        if not is_transition_valid(self._current_stage, target):
            return False
        return evaluate_guards(self._current_stage, target, snapshot).allowed

    def get_valid_targets(self) -> frozenset[BootstrapStage]:
        return get_valid_targets(self._current_stage)

    def transition(
        self,
        target: BootstrapStage,
        trigger: str,
        snapshot: BootstrapSnapshot | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição.

        Args:
            target: Estado de destino
            trigger: Evento que causou a transição
            snapshot: Progresso das tarefas (consultado pelos gates)
            metadata: Dados adicionais para logs (nunca PII)

        Returns:
            TransitionResult com sucesso/falha
        """
        if not is_transition_valid(self._current_stage, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_stage.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_stage, target, snapshot)
        if not guard_result.allowed:
            return TransitionResult(success=False, error_reason=guard_result.reason)

        transition = StateTransition(
            from_stage=self._current_stage,
            to_stage=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_stage = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual, seguro para logs."""
        return {
            "launch_id": self._launch_id,
            "current_stage": self._current_stage.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_bootstrap_machine(launch_id: str = "") -> BootstrapMachine:
    """Factory de uma máquina nova em INIT."""
    return BootstrapMachine(launch_id=launch_id)
