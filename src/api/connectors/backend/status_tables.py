"""Tabelas status HTTP → outcome, declaradas por operação.

A semântica de status muda por endpoint (404 é "lista vazia" em um e
"não encontrado" em outro), então cada operação declara sua própria
tabela e o executor apenas a aplica.

Uso:
    LOGIN_TABLE = StatusTable(
        rules={
            200: payload(if_empty="Login failed"),
            400: fail("Please fill in both fields."),
        },
        default=fail(UNEXPECTED_ERROR_MESSAGE),
    )
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from api.connectors.backend.outcomes import (
    EMPTY_RESULT,
    DomainError,
    RequestOutcome,
    Success,
)

StatusRule = Callable[[httpx.Response], RequestOutcome]

DEFAULT_ERROR_PREFIX = "Internal server error!"


def decode_body(response: httpx.Response) -> Any:
    """Decodifica o corpo JSON; corpo vazio vira None.

    Raises:
        ValueError: Corpo presente mas não é JSON válido.
    """
    if not response.content or not response.content.strip():
        return None
    return response.json()


def _is_empty(data: Any) -> bool:
    return data is None or data == "" or data == {}


def payload(*, if_empty: str | None = None, default: Any = None) -> StatusRule:
    """Regra que devolve Success com o corpo decodificado.

    Args:
        if_empty: Se informado, corpo vazio vira DomainError com esta mensagem.
        default: Payload usado quando o corpo é vazio e if_empty não é informado.
    """

    def rule(response: httpx.Response) -> RequestOutcome:
        data = decode_body(response)
        if _is_empty(data):
            if if_empty is not None:
                return DomainError(if_empty)
            return Success(default)
        return Success(data)

    return rule


def fail(message: str) -> StatusRule:
    """Regra que devolve DomainError com mensagem fixa."""
    outcome = DomainError(message)
    return lambda _response: outcome


def succeed(value: Any) -> StatusRule:
    """Regra que devolve Success com valor fixo, ignorando o corpo."""
    outcome = Success(value)
    return lambda _response: outcome


def empty() -> StatusRule:
    """Regra que devolve EmptyResult."""
    return lambda _response: EMPTY_RESULT


@dataclass(frozen=True)
class StatusTable:
    """Mapeamento status → regra de uma operação.

    Attributes:
        rules: Regras por status code
        default: Regra para qualquer status não listado
        error_prefix: Prefixo do TransportError quando a chamada levanta exceção
    """

    rules: Mapping[int, StatusRule] = field(default_factory=dict)
    default: StatusRule = field(default_factory=empty)
    error_prefix: str = DEFAULT_ERROR_PREFIX

    def resolve(self, response: httpx.Response) -> RequestOutcome:
        """Aplica a regra do status recebido."""
        rule = self.rules.get(response.status_code, self.default)
        return rule(response)

    def transport_error_message(self, exc: BaseException) -> str:
        """Monta a mensagem de TransportError com o texto da exceção."""
        return f"{self.error_prefix}\n{exc}"
