"""Coordinator de startup: sequenciamento do bootstrap e prefetch."""

from app.coordinators.startup.prefetch import (
    prefetch_authentication_screens,
    prefetch_main_screens,
    prefetch_screens,
)
from app.coordinators.startup.sequencer import (
    ALERT_BUTTON_TEXT,
    ALERT_TITLE,
    ASSET_FAILURE_MESSAGE,
    SESSION_FAILURE_MESSAGE,
    BootstrapResult,
    BootstrapSequencer,
)

__all__ = [
    "ALERT_BUTTON_TEXT",
    "ALERT_TITLE",
    "ASSET_FAILURE_MESSAGE",
    "SESSION_FAILURE_MESSAGE",
    "BootstrapResult",
    "BootstrapSequencer",
    "prefetch_authentication_screens",
    "prefetch_main_screens",
    "prefetch_screens",
]
