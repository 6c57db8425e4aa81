"""
Guards para transições do startup.

Além das regras estruturais (terminal, reflexiva), os guards de READY e
ROUTING consultam o snapshot das tarefas paralelas. O sequenciador
reavalia esses guards a cada atualização do snapshot, então a ordem em
que as tarefas terminam não importa.
"""

from collections.abc import Callable

from fsm.states.bootstrap import TERMINAL_STAGES, BootstrapStage
from fsm.types.snapshot import BootstrapSnapshot


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        return cls(allowed=False, reason=reason)


Guard = Callable[
    [BootstrapStage, BootstrapStage, BootstrapSnapshot | None], GuardResult
]


def guard_valid_stage(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
) -> GuardResult:
    """Guard: ambos os estados precisam ser BootstrapStage."""
    if not isinstance(from_stage, BootstrapStage):
        return GuardResult.deny(f"Estado de origem inválido: {from_stage}")
    if not isinstance(to_stage, BootstrapStage):
        return GuardResult.deny(f"Estado de destino inválido: {to_stage}")
    return GuardResult.allow()


def guard_terminal_stage(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
) -> GuardResult:
    """Guard: estados terminais não permitem saída."""
    if from_stage in TERMINAL_STAGES:
        return GuardResult.deny(
            f"Estado {from_stage.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_stage(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
) -> GuardResult:
    """Guard: nenhum estado do startup transita para si mesmo."""
    if from_stage == to_stage:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_stage.name} → {to_stage.name}"
        )
    return GuardResult.allow()


def guard_ready_gate(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
) -> GuardResult:
    """Guard: READY exige assets críticos prontos e sessão determinada."""
    if to_stage != BootstrapStage.READY:
        return GuardResult.allow()
    if snapshot is None:
        return GuardResult.deny("READY exige snapshot das tarefas de startup")
    if not snapshot.assets_ready:
        return GuardResult.deny("Assets críticos ainda não carregados")
    if not snapshot.session_determined:
        return GuardResult.deny("Sessão ainda não determinada")
    return GuardResult.allow()


def guard_routing_gate(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
) -> GuardResult:
    """Guard: ROUTING nunca dispara com snapshot incompleto."""
    if to_stage != BootstrapStage.ROUTING:
        return GuardResult.allow()
    if snapshot is None or not snapshot.is_ready:
        return GuardResult.deny("Roteamento exige assets prontos e sessão determinada")
    return GuardResult.allow()


# Aplicados em ordem; o primeiro deny interrompe
DEFAULT_GUARDS: list[Guard] = [
    guard_valid_stage,
    guard_terminal_stage,
    guard_same_stage,
    guard_ready_gate,
    guard_routing_gate,
]


def evaluate_guards(
    from_stage: BootstrapStage,
    to_stage: BootstrapStage,
    snapshot: BootstrapSnapshot | None = None,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia os guards de uma transição.

    Args:
        from_stage: Estado de origem
        to_stage: Estado de destino
        snapshot: Progresso das tarefas de startup
        guards: Guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    for guard in guards if guards is not None else DEFAULT_GUARDS:
        result = guard(from_stage, to_stage, snapshot)
        if not result.allowed:
            return result
    return GuardResult.allow()
