"""Colaboradores de UI para execução sem interface (CLI, smoke tests).

Navegação e alertas viram logs; assets são arquivos que precisam existir.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from app.protocols.alerts import Alert
from utils.errors import AssetLoadError

logger = logging.getLogger(__name__)


class LoggingNavigator:
    """NavigatorProtocol que registra a rota corrente."""

    def __init__(self) -> None:
        self.current_route: str | None = None
        self.prefetched: list[str] = []

    def replace(self, route: str) -> None:
        self.current_route = route
        logger.info("navigator_replace", extra={"route": route})

    def prefetch(self, route: str) -> None:
        self.prefetched.append(route)
        logger.debug("navigator_prefetch", extra={"route": route})


class LoggingAlertPresenter:
    """AlertPresenterProtocol que registra o alerta; a ação não é executada."""

    def __init__(self) -> None:
        self.last_alert: Alert | None = None

    def show(self, alert: Alert) -> None:
        self.last_alert = alert
        logger.error(
            "alert_shown",
            extra={"title": alert.title, "text": alert.text, "button": alert.button_text},
        )


class FileAssetLoader:
    """AssetLoaderProtocol que confirma a existência dos arquivos.

    Args:
        root: Diretório base dos caminhos relativos
    """

    def __init__(self, root: Path | str = ".") -> None:
        self._root = Path(root)

    async def load(self, assets: Sequence[str]) -> None:
        missing = await asyncio.to_thread(self._missing, list(assets))
        if missing:
            raise AssetLoadError(f"Missing assets: {', '.join(missing)}")
        logger.debug("assets_loaded", extra={"count": len(assets)})

    def _missing(self, assets: list[str]) -> list[str]:
        return [name for name in assets if not (self._root / name).is_file()]
