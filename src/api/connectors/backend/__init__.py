"""Connector do backend REST: executor, outcomes e clientes por recurso."""

from api.connectors.backend.affiliation_client import AffiliationClient
from api.connectors.backend.http_base import HttpClientConfig, RequestExecutor
from api.connectors.backend.ids import generate_record_id, generate_recovery_code
from api.connectors.backend.outcomes import (
    EMPTY_RESULT,
    NO_BACKEND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    DomainError,
    EmptyResult,
    OutcomeKind,
    RequestOutcome,
    RequestTimeout,
    Success,
    TransportError,
    failure_message,
    is_failure,
)
from api.connectors.backend.status_tables import StatusTable
from api.connectors.backend.user_client import UserClient

__all__ = [
    "EMPTY_RESULT",
    "NO_BACKEND_MESSAGE",
    "SERVER_ERROR_MESSAGE",
    "TIMEOUT_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "AffiliationClient",
    "DomainError",
    "EmptyResult",
    "HttpClientConfig",
    "OutcomeKind",
    "RequestExecutor",
    "RequestOutcome",
    "RequestTimeout",
    "StatusTable",
    "Success",
    "TransportError",
    "UserClient",
    "failure_message",
    "generate_record_id",
    "generate_recovery_code",
    "is_failure",
]
