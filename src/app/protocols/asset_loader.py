"""Protocolo de carga de assets (imagens, fontes) antes das telas."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class AssetLoaderProtocol(Protocol):
    """Carrega um lote de assets; levanta exceção se algum falhar."""

    async def load(self, assets: Sequence[str]) -> None: ...
