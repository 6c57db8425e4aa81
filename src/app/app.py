"""Entrypoint headless do Coachlink.

Executa uma passada de bootstrap sem interface: navegação e alertas
viram logs e assets são arquivos que precisam existir em disco.

Uso:
    coachlink-launch --asset-root ./assets --critical fonts/main.ttf \
        --deferred images/background.png

Código de saída 0 quando a passada navega, 1 quando termina em falha.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_sequencer
from app.infra.shell import FileAssetLoader, LoggingAlertPresenter, LoggingNavigator
from config.logging import get_logger

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Executa uma passada de bootstrap.")
    parser.add_argument(
        "--asset-root",
        default=".",
        help="Diretório base dos assets.",
    )
    parser.add_argument(
        "--critical",
        nargs="*",
        default=[],
        help="Assets exigidos antes da primeira tela.",
    )
    parser.add_argument(
        "--deferred",
        nargs="*",
        default=[],
        help="Assets carregados após confirmar internet.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    initialize_app()
    validate_runtime_settings()

    navigator = LoggingNavigator()
    sequencer = create_sequencer(
        navigator=navigator,
        alerts=LoggingAlertPresenter(),
        asset_loader=FileAssetLoader(args.asset_root),
        critical_assets=args.critical,
        non_critical_assets=args.deferred,
    )
    result = asyncio.run(sequencer.run())

    logger.info(
        "launch_finished",
        extra={
            "stage": result.stage.name,
            "route": result.route,
            "launch_id": result.launch_id,
        },
    )
    return 0 if result.navigated else 1


if __name__ == "__main__":
    sys.exit(main())
