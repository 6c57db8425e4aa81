"""
Estados canônicos do startup da aplicação.

Cada passada de bootstrap percorre estes estados em ordem e termina em
NAVIGATED (tela de destino aberta) ou FAILED (alerta com ação de restart).
"""

from enum import StrEnum


class BootstrapStage(StrEnum):
    """
    Estados do sequenciador de startup.

    Estados não-terminais:
        - INIT: Nada iniciado
        - PREPARING: Assets críticos e sessão sendo resolvidos em paralelo
        - READY: Assets prontos e sessão determinada (presente ou ausente)
        - CHECKING_CONNECTIVITY: Consulta ao probe de rede
        - LOADING_DEFERRED_ASSETS: Carga dos assets não-críticos
        - ROUTING: Prefetch agendado, navegação em curso

    Estados terminais:
        - NAVIGATED: Destino aberto (introdução ou home)
        - FAILED: Falha exibida ao usuário; só o restart completo recupera
    """

    INIT = "INIT"
    PREPARING = "PREPARING"
    READY = "READY"
    CHECKING_CONNECTIVITY = "CHECKING_CONNECTIVITY"
    LOADING_DEFERRED_ASSETS = "LOADING_DEFERRED_ASSETS"
    ROUTING = "ROUTING"

    NAVIGATED = "NAVIGATED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STAGES: frozenset[BootstrapStage] = frozenset({
    BootstrapStage.NAVIGATED,
    BootstrapStage.FAILED,
})

DEFAULT_INITIAL_STAGE: BootstrapStage = BootstrapStage.INIT


def is_terminal(stage: BootstrapStage) -> bool:
    """Verifica se o estado encerra a passada de bootstrap."""
    return stage in TERMINAL_STAGES


def is_valid_stage(stage: BootstrapStage) -> bool:
    """Verifica se o valor é um BootstrapStage."""
    return isinstance(stage, BootstrapStage)
