"""Fakes dos colaboradores de startup para testes deterministas.

Cada fake registra as chamadas recebidas; os que suspendem podem ser
liberados manualmente via asyncio.Event para controlar a ordem em que
as tarefas paralelas terminam.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from app.protocols.alerts import Alert
from app.protocols.connectivity import NetworkState
from app.sessions.models import Session


class FakeNavigator:
    """Registra replace/prefetch; pode falhar no prefetch."""

    def __init__(self, *, fail_prefetch: bool = False) -> None:
        self.replaced: list[str] = []
        self.prefetched: list[str] = []
        self._fail_prefetch = fail_prefetch

    @property
    def current_route(self) -> str | None:
        return self.replaced[-1] if self.replaced else None

    def replace(self, route: str) -> None:
        self.replaced.append(route)

    def prefetch(self, route: str) -> None:
        if self._fail_prefetch:
            raise RuntimeError(f"prefetch indisponível: {route}")
        self.prefetched.append(route)


class FakeAlertPresenter:
    def __init__(self) -> None:
        self.alerts: list[Alert] = []

    def show(self, alert: Alert) -> None:
        self.alerts.append(alert)


class FakeAssetLoader:
    """Loader cujas chamadas podem ser retidas e/ou falhar.

    A primeira chamada é a dos assets críticos, a segunda a dos
    não-críticos.

    Args:
        critical_error: Exceção levantada na carga crítica
        deferred_error: Exceção levantada na carga não-crítica
        hold_critical: Se True, a carga crítica espera `release_critical()`
    """

    def __init__(
        self,
        *,
        critical_error: Exception | None = None,
        deferred_error: Exception | None = None,
        hold_critical: bool = False,
    ) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._errors = [critical_error, deferred_error]
        self._critical_gate = asyncio.Event()
        if not hold_critical:
            self._critical_gate.set()

    def release_critical(self) -> None:
        self._critical_gate.set()

    async def load(self, assets: Sequence[str]) -> None:
        index = len(self.calls)
        self.calls.append(tuple(assets))
        if index == 0:
            await self._critical_gate.wait()
        error = self._errors[index] if index < len(self._errors) else None
        if error is not None:
            raise error


class FakeConnectivityProbe:
    def __init__(self, state: NetworkState | None = None) -> None:
        self.state = state or NetworkState(connected=True, internet_reachable=True)
        self.checks = 0

    async def check(self) -> NetworkState:
        self.checks += 1
        return self.state


class FakeSessionStore:
    """Store cujo load devolve uma sessão fixa, opcionalmente retido.

    Implementa só o necessário para o sequenciador (load); os demais
    métodos mantêm a sessão em memória.
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        hold: bool = False,
        error: Exception | None = None,
    ) -> None:
        self.session = session
        self.loads = 0
        self._error = error
        self._gate = asyncio.Event()
        if not hold:
            self._gate.set()

    def release(self) -> None:
        self._gate.set()

    async def load(self) -> Session | None:
        self.loads += 1
        await self._gate.wait()
        if self._error is not None:
            raise self._error
        return self.session

    async def save(self, session: Session) -> None:
        self.session = session

    async def clear(self) -> None:
        self.session = None

    async def load_preferences(self) -> dict[str, str]:
        return dict(self.session.preferences) if self.session else {}

    async def save_preferences(self, preferences: dict[str, str]) -> dict[str, str]:
        return preferences
