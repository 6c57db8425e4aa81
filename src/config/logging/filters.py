"""Filters de logging para injeção de contexto.

Campos injetados em todo record:
- correlation_id: ID da execução corrente (ex: uma passada de bootstrap)
- service: Nome do serviço (ex: coachlink)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Nunca adicionar corpos de requisição, senhas ou imagens nos logs.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        """Inicializa o filter.

        Args:
            service_name: Nome do serviço (ex: "coachlink").
            correlation_id_getter: Função para obter correlation_id do contexto.
                Sem ela, o campo fica vazio.
        """
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Um correlation_id passado explicitamente via `extra` tem precedência.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        return True
