"""Prefetch das telas de destino do startup.

Dicas fire-and-forget: uma falha de prefetch é registrada e nunca
interrompe a navegação.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from app.constants.routes import AUTHENTICATION_SCREENS, MAIN_SCREENS

if TYPE_CHECKING:
    from app.protocols.navigator import NavigatorProtocol

logger = logging.getLogger(__name__)


def prefetch_screens(navigator: NavigatorProtocol, routes: Iterable[str]) -> None:
    for route in routes:
        try:
            navigator.prefetch(route)
        except Exception as exc:
            logger.warning(
                "prefetch_failed",
                extra={"route": route, "error_type": type(exc).__name__},
            )


def prefetch_authentication_screens(navigator: NavigatorProtocol) -> None:
    prefetch_screens(navigator, AUTHENTICATION_SCREENS)


def prefetch_main_screens(navigator: NavigatorProtocol) -> None:
    prefetch_screens(navigator, MAIN_SCREENS)
