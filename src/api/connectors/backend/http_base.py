"""Executor HTTP base para os clientes do backend.

Contrato: `execute()` sempre resolve em um RequestOutcome, nunca levanta,
dentro de um orçamento de tempo fixo por chamada.

- URL base ausente: erro de configuração imediato, sem rede e sem timer.
- Orçamento estourado: a chamada é cancelada e vira RequestTimeout,
  mesmo que exista resposta parcial.
- Qualquer outra exceção: TransportError com a mensagem original.
- Cada chamada tem seu próprio timer; ele é desarmado ao sair do bloco,
  qualquer que seja o caminho de saída.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from api.connectors.backend.outcomes import (
    NO_BACKEND_MESSAGE,
    RequestOutcome,
    RequestTimeout,
    TransportError,
)
from api.connectors.backend.status_tables import StatusTable
from config.settings.backend import DEFAULT_REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

_NO_BACKEND = TransportError(NO_BACKEND_MESSAGE)
_DEFAULT_TABLE = StatusTable()


@dataclass
class HttpClientConfig:
    """Configuração do executor HTTP."""

    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    verify_ssl: bool = True


class RequestExecutor:
    """Executa uma requisição por chamada contra uma URL base.

    Args:
        base_url: URL base do recurso. Vazia/None = backend não configurado.
        config: Timeout, headers e TLS.
        transport: Transport httpx alternativo (testes usam MockTransport).
    """

    def __init__(
        self,
        base_url: str | None,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    def url_for(self, path: str = "") -> str:
        """Monta URL absoluta: base + path relativo (ex: "/login")."""
        if not path:
            return self._base_url
        return f"{self._base_url}/{path.lstrip('/')}"

    async def execute(
        self,
        method: str,
        path: str = "",
        body: Any = None,
        table: StatusTable | None = None,
    ) -> RequestOutcome:
        """Executa a requisição e aplica a tabela de status da operação.

        Args:
            method: Verbo HTTP (GET, POST, PUT, DELETE)
            path: Caminho relativo à URL base
            body: Corpo serializado como JSON (None = sem corpo)
            table: Tabela status → outcome da operação

        Returns:
            Exatamente um RequestOutcome.
        """
        if not self._base_url:
            logger.warning(
                "backend_not_configured", extra={"method": method, "path": path}
            )
            return _NO_BACKEND

        status_table = table or _DEFAULT_TABLE
        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                response = await self._send(method, self.url_for(path), body)
            outcome = status_table.resolve(response)
        except (TimeoutError, httpx.TimeoutException):
            logger.warning(
                "backend_request_timeout",
                extra={
                    "method": method,
                    "path": path,
                    "timeout_seconds": self._config.timeout_seconds,
                },
            )
            return RequestTimeout()
        except Exception as exc:
            logger.warning(
                "backend_request_failed",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            return TransportError(status_table.transport_error_message(exc))

        logger.info(
            "backend_request_completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "outcome": outcome.kind.value,
            },
        )
        return outcome

    async def _send(self, method: str, url: str, body: Any) -> httpx.Response:
        async with httpx.AsyncClient(
            transport=self._transport,
            verify=self._config.verify_ssl,
            headers=self._config.default_headers,
        ) as client:
            return await client.request(
                method,
                url,
                json=body,
                timeout=self._config.timeout_seconds,
            )
