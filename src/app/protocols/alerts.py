"""Protocolo de alertas modais exibidos ao usuário."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Alert:
    """Alerta modal com uma única ação.

    Attributes:
        title: Título do alerta
        text: Mensagem exibida sem alteração
        button_text: Rótulo do único botão
        on_press: Ação do botão
    """

    title: str
    text: str
    button_text: str
    on_press: Callable[[], None]


class AlertPresenterProtocol(Protocol):
    """Exibe alertas; o core não aguarda a interação do usuário."""

    def show(self, alert: Alert) -> None: ...
