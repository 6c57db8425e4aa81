"""Adapters de shell headless: navegação, alertas e assets sem UI."""

from app.infra.shell.headless import (
    FileAssetLoader,
    LoggingAlertPresenter,
    LoggingNavigator,
)

__all__ = [
    "FileAssetLoader",
    "LoggingAlertPresenter",
    "LoggingNavigator",
]
