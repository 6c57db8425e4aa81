"""Probe de conectividade via requisição HTTP leve.

Regra (mesma semântica do NetInfo):
- connected: alguma resposta HTTP chegou (interface e rota ativas)
- internet_reachable: a resposta é 2xx no endpoint de checagem

Falha de conexão/DNS conta como desconectado; timeout e outros erros
de transporte, como conectado sem alcance.
"""

from __future__ import annotations

import logging

import httpx

from app.protocols.connectivity import NetworkState
from config.settings.connectivity import DEFAULT_CHECK_URL

logger = logging.getLogger(__name__)


class HttpConnectivityProbe:
    """ConnectivityProbeProtocol sobre httpx.

    Args:
        check_url: Endpoint consultado (204 esperado)
        timeout_seconds: Tempo máximo da consulta
        transport: Transport httpx alternativo (testes)
    """

    def __init__(
        self,
        check_url: str = DEFAULT_CHECK_URL,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._check_url = check_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def check(self) -> NetworkState:
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout_seconds
            ) as client:
                response = await client.get(self._check_url)
        except httpx.NetworkError as exc:
            logger.info("connectivity_offline", extra={"error_type": type(exc).__name__})
            return NetworkState(connected=False, internet_reachable=False)
        except httpx.HTTPError as exc:
            logger.info("connectivity_unreachable", extra={"error_type": type(exc).__name__})
            return NetworkState(connected=True, internet_reachable=False)

        reachable = response.is_success
        logger.debug(
            "connectivity_checked",
            extra={"status_code": response.status_code, "internet_reachable": reachable},
        )
        return NetworkState(connected=True, internet_reachable=reachable)
