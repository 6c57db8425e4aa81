"""
Regras de transição válidas entre estados do startup.

O caminho feliz é linear; de qualquer estado não-terminal é possível
cair em FAILED. Não existe retry parcial: sair de FAILED exige uma nova
passada a partir de INIT.
"""

from fsm.states.bootstrap import TERMINAL_STAGES, BootstrapStage

TransitionMap = dict[BootstrapStage, frozenset[BootstrapStage]]

VALID_TRANSITIONS: TransitionMap = {
    BootstrapStage.INIT: frozenset({
        BootstrapStage.PREPARING,
        BootstrapStage.FAILED,
    }),
    # PREPARING: só avança quando assets e sessão estão determinados
    BootstrapStage.PREPARING: frozenset({
        BootstrapStage.READY,
        BootstrapStage.FAILED,
    }),
    BootstrapStage.READY: frozenset({
        BootstrapStage.CHECKING_CONNECTIVITY,
        BootstrapStage.FAILED,
    }),
    BootstrapStage.CHECKING_CONNECTIVITY: frozenset({
        BootstrapStage.LOADING_DEFERRED_ASSETS,
        BootstrapStage.FAILED,
    }),
    BootstrapStage.LOADING_DEFERRED_ASSETS: frozenset({
        BootstrapStage.ROUTING,
        BootstrapStage.FAILED,
    }),
    BootstrapStage.ROUTING: frozenset({
        BootstrapStage.NAVIGATED,
        BootstrapStage.FAILED,
    }),
    BootstrapStage.NAVIGATED: frozenset(),
    BootstrapStage.FAILED: frozenset(),
}


def get_valid_targets(stage: BootstrapStage) -> frozenset[BootstrapStage]:
    """Retorna os destinos permitidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(stage, frozenset())


def is_transition_valid(from_stage: BootstrapStage, to_stage: BootstrapStage) -> bool:
    """Verifica se a transição existe no mapa."""
    if from_stage in TERMINAL_STAGES:
        return False
    return to_stage in get_valid_targets(from_stage)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não-terminal alcança FAILED

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for stage in BootstrapStage:
        if stage not in VALID_TRANSITIONS:
            errors.append(f"Estado {stage.name} ausente em VALID_TRANSITIONS")

    for stage in TERMINAL_STAGES:
        targets = VALID_TRANSITIONS.get(stage, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {stage.name} não deveria ter transições: {targets}"
            )

    for stage, targets in VALID_TRANSITIONS.items():
        if stage not in TERMINAL_STAGES and BootstrapStage.FAILED not in targets:
            errors.append(f"Estado {stage.name} não alcança FAILED")

    return errors
