"""Sequenciador de startup (bootstrap) da aplicação.

Fluxo de uma passada:
    1. Em paralelo: assets críticos e restauração da sessão
    2. READY quando assets prontos E sessão determinada (gate reavaliado
       a cada tarefa concluída, em qualquer ordem)
    3. Verificação de conectividade (sem internet = falha)
    4. Assets não-críticos
    5. Prefetch + navegação: introdução sem sessão, home com sessão

Qualquer falha no caminho crítico termina em FAILED com um alerta modal
cuja única ação reinicia tudo pela rota de entrada. Não há retry parcial.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.constants.routes import ENTRY, HOMEPAGE, INTRODUCTION
from app.coordinators.startup.prefetch import (
    prefetch_authentication_screens,
    prefetch_main_screens,
)
from app.observability import bind_correlation_id
from app.protocols.alerts import Alert
from fsm import (
    BootstrapMachine,
    BootstrapSnapshot,
    BootstrapStage,
    StateTransition,
    create_bootstrap_machine,
)
from utils.errors import AssetLoadError, BootstrapError, NoInternetError

if TYPE_CHECKING:
    from app.protocols.alerts import AlertPresenterProtocol
    from app.protocols.asset_loader import AssetLoaderProtocol
    from app.protocols.connectivity import ConnectivityProbeProtocol
    from app.protocols.navigator import NavigatorProtocol
    from app.protocols.session_store import SessionStoreProtocol
    from app.sessions.models import Session

logger = logging.getLogger(__name__)

ALERT_TITLE = "Application Failure"
ALERT_BUTTON_TEXT = "RETRY"
ASSET_FAILURE_MESSAGE = "Application failed loading assets!"
SESSION_FAILURE_MESSAGE = "Application failed loading user session!"


@dataclass(frozen=True)
class BootstrapResult:
    """Resultado de uma passada de bootstrap.

    Attributes:
        stage: Estado terminal (NAVIGATED ou FAILED)
        route: Rota aberta (None se falhou)
        error_message: Texto exibido no alerta (None se navegou)
        session: Sessão restaurada, para injeção nas telas
        history: Transições realizadas
        launch_id: correlation_id da passada
    """

    stage: BootstrapStage
    route: str | None = None
    error_message: str | None = None
    session: Session | None = None
    history: tuple[StateTransition, ...] = field(default_factory=tuple)
    launch_id: str = ""

    @property
    def navigated(self) -> bool:
        return self.stage == BootstrapStage.NAVIGATED


class BootstrapSequencer:
    """Orquestra o startup sobre colaboradores injetados.

    Args:
        session_store: Fonte da sessão persistida
        asset_loader: Carga de assets críticos e não-críticos
        connectivity_probe: Estado de rede
        navigator: Troca de tela e prefetch
        alerts: Exibição do alerta de falha
        critical_assets: Assets exigidos antes da primeira tela
        non_critical_assets: Assets carregados após confirmar internet
    """

    def __init__(
        self,
        *,
        session_store: SessionStoreProtocol,
        asset_loader: AssetLoaderProtocol,
        connectivity_probe: ConnectivityProbeProtocol,
        navigator: NavigatorProtocol,
        alerts: AlertPresenterProtocol,
        critical_assets: Sequence[str] = (),
        non_critical_assets: Sequence[str] = (),
    ) -> None:
        self._session_store = session_store
        self._asset_loader = asset_loader
        self._probe = connectivity_probe
        self._navigator = navigator
        self._alerts = alerts
        self._critical_assets = tuple(critical_assets)
        self._non_critical_assets = tuple(non_critical_assets)

    async def run(self) -> BootstrapResult:
        """Executa uma passada completa e devolve o estado terminal."""
        with bind_correlation_id() as launch_id:
            machine = create_bootstrap_machine(launch_id)
            snapshot = BootstrapSnapshot()
            logger.info("bootstrap_started")
            self._advance(machine, BootstrapStage.PREPARING, "launch", snapshot)

            try:
                await self._prepare(machine, snapshot)
            except BootstrapError as exc:
                return self._fail(machine, snapshot, str(exc))

            # Um único escopo de falha para todo o ramo após READY
            try:
                route = await self._route(machine, snapshot)
            except Exception as exc:
                return self._fail(machine, snapshot, str(exc))

            logger.info("bootstrap_navigated", extra={"route": route})
            return BootstrapResult(
                stage=machine.current_stage,
                route=route,
                session=snapshot.session,
                history=tuple(machine.history),
                launch_id=launch_id,
            )

    def restart(self) -> None:
        """Ação do alerta: reabre a rota de entrada, que dispara nova passada."""
        logger.info("bootstrap_restart_requested")
        self._navigator.replace(ENTRY)

    async def _prepare(self, machine: BootstrapMachine, snapshot: BootstrapSnapshot) -> None:
        assets_task = asyncio.create_task(
            self._asset_loader.load(self._critical_assets), name="critical_assets"
        )
        session_task = asyncio.create_task(
            self._session_store.load(), name="session_restore"
        )
        pending: set[asyncio.Task[Any]] = {assets_task, session_task}
        try:
            while not machine.can_transition_to(BootstrapStage.READY, snapshot):
                if not pending:
                    raise BootstrapError(SESSION_FAILURE_MESSAGE)
                done, pending = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                # Assets primeiro: falha de asset vence mesmo com sessão pronta
                for task in sorted(done, key=lambda t: t is not assets_task):
                    if task is assets_task:
                        self._apply_assets(task, snapshot)
                    else:
                        self._apply_session(task, snapshot)
        finally:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        self._advance(machine, BootstrapStage.READY, "startup_tasks_settled", snapshot)

    def _apply_assets(self, task: asyncio.Task[Any], snapshot: BootstrapSnapshot) -> None:
        exc = task.exception()
        if exc is not None:
            logger.error(
                "critical_assets_failed", extra={"error_type": type(exc).__name__}
            )
            raise AssetLoadError(ASSET_FAILURE_MESSAGE) from exc
        snapshot.assets_ready = True
        logger.info("critical_assets_loaded", extra=snapshot.to_log_dict())

    def _apply_session(self, task: asyncio.Task[Any], snapshot: BootstrapSnapshot) -> None:
        exc = task.exception()
        if exc is not None:
            logger.error("session_restore_failed", extra={"error_type": type(exc).__name__})
            raise BootstrapError(SESSION_FAILURE_MESSAGE) from exc
        snapshot.session = task.result()
        logger.info("session_resolved", extra=snapshot.to_log_dict())

    async def _route(self, machine: BootstrapMachine, snapshot: BootstrapSnapshot) -> str:
        self._advance(machine, BootstrapStage.CHECKING_CONNECTIVITY, "ready", snapshot)
        network = await self._probe.check()
        if not network.has_internet:
            raise NoInternetError()

        self._advance(
            machine, BootstrapStage.LOADING_DEFERRED_ASSETS, "internet_available", snapshot
        )
        await self._asset_loader.load(self._non_critical_assets)

        self._advance(machine, BootstrapStage.ROUTING, "deferred_assets_loaded", snapshot)
        if snapshot.has_session:
            prefetch_main_screens(self._navigator)
            route = HOMEPAGE
        else:
            prefetch_authentication_screens(self._navigator)
            route = INTRODUCTION

        self._navigator.replace(route)
        self._advance(
            machine, BootstrapStage.NAVIGATED, "navigated", snapshot, {"route": route}
        )
        return route

    def _advance(
        self,
        machine: BootstrapMachine,
        target: BootstrapStage,
        trigger: str,
        snapshot: BootstrapSnapshot,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        result = machine.transition(target, trigger, snapshot, metadata)
        if not result.success:
            raise BootstrapError(result.error_reason or f"Transição recusada: {target}")
        logger.debug("bootstrap_transition", extra=result.transition.to_log_dict())

    def _fail(
        self,
        machine: BootstrapMachine,
        snapshot: BootstrapSnapshot,
        message: str,
    ) -> BootstrapResult:
        failed_at = machine.current_stage
        machine.transition(
            BootstrapStage.FAILED, "failure", snapshot, {"failed_at": failed_at.name}
        )
        logger.error(
            "bootstrap_failed",
            extra={"failed_at": failed_at.name, "error": message},
        )
        self._alerts.show(
            Alert(
                title=ALERT_TITLE,
                text=message,
                button_text=ALERT_BUTTON_TEXT,
                on_press=self.restart,
            )
        )
        return BootstrapResult(
            stage=machine.current_stage,
            error_message=message,
            history=tuple(machine.history),
            launch_id=machine.launch_id,
        )
