"""Outcomes tipados das chamadas ao backend.

Toda operação de rede termina em exatamente um destes valores, nunca em
exceção. Callers devem tratar os cinco casos:

- Success(payload): resposta aceita, payload já decodificado
- EmptyResult: recurso ausente, não é erro (ex: lista vazia)
- DomainError(message): condição esperada e exibível ao usuário
- RequestTimeout(message): orçamento de tempo estourado
- TransportError(message): falha de rede/parse ou exceção inesperada
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Mensagens exibidas ao usuário (texto exato)
NO_BACKEND_MESSAGE = "No backend server available!\nPlease try again later."
TIMEOUT_MESSAGE = "The request timed out!\nPlease try again later."
SERVER_ERROR_MESSAGE = "Internal server error!\nPlease try again later."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error!\nPlease try again later."


class OutcomeKind(StrEnum):
    """Tag de cada variante de outcome."""

    SUCCESS = "success"
    EMPTY = "empty"
    DOMAIN_ERROR = "domain_error"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Success:
    """Resposta aceita pelo backend."""

    payload: Any = None

    kind = OutcomeKind.SUCCESS

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class EmptyResult:
    """Ausência legítima de dados; deve ser tratada como coleção vazia."""

    kind = OutcomeKind.EMPTY

    @property
    def ok(self) -> bool:
        return True

    @property
    def payload(self) -> list[Any]:
        return []


@dataclass(frozen=True, slots=True)
class DomainError:
    """Erro esperado derivado de um status específico. Nunca re-tentado."""

    message: str

    kind = OutcomeKind.DOMAIN_ERROR

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class RequestTimeout:
    """Chamada cancelada ao fim do orçamento de tempo."""

    message: str = TIMEOUT_MESSAGE

    kind = OutcomeKind.TIMEOUT

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TransportError:
    """Falha de transporte, parse ou configuração, com a mensagem original."""

    message: str

    kind = OutcomeKind.TRANSPORT_ERROR

    @property
    def ok(self) -> bool:
        return False


RequestOutcome = Success | EmptyResult | DomainError | RequestTimeout | TransportError

# Variantes que carregam mensagem exibível
FailureOutcome = DomainError | RequestTimeout | TransportError

EMPTY_RESULT = EmptyResult()


def is_failure(outcome: RequestOutcome) -> bool:
    """True para DomainError, RequestTimeout e TransportError."""
    return not outcome.ok


def failure_message(outcome: RequestOutcome) -> str | None:
    """Retorna o texto para exibição inline, ou None se não for falha."""
    if isinstance(outcome, DomainError | RequestTimeout | TransportError):
        return outcome.message
    return None
