"""Cliente do recurso Affiliation (vínculo entre usuário e coach).

Endpoints (relativos a AFFILIATION_API_URL):
    POST   /            cria afiliação
    GET    /            lista todas
    GET    /{ownerId}   afiliações de um usuário
    DELETE /{id}        encerra afiliação
"""

from __future__ import annotations

from typing import Any

from api.connectors.backend.http_base import RequestExecutor
from api.connectors.backend.outcomes import (
    SERVER_ERROR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    DomainError,
    RequestOutcome,
)
from api.connectors.backend.status_tables import StatusTable, empty, fail, payload, succeed

AFFILIATION_ENDED_MESSAGE = "Affiliation ended successfully!"
OWNER_ID_REQUIRED_MESSAGE = "User ID is required!"

CREATE_TABLE = StatusTable(
    rules={
        200: payload(),
        400: fail("Missing or invalid user information!"),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)

LIST_ALL_TABLE = StatusTable(
    rules={
        200: payload(),
        404: empty(),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)

# Status desconhecido também vira EmptyResult: ausência e falha real
# ficam indistinguíveis para o caller neste endpoint.
LIST_BY_OWNER_TABLE = StatusTable(
    rules={
        200: payload(),
        400: fail("User ID cannot be null or empty!"),
        404: empty(),
    },
    default=empty(),
)

END_TABLE = StatusTable(
    rules={
        200: succeed(AFFILIATION_ENDED_MESSAGE),
        400: fail("User ID and Affiliate ID must be provided."),
        500: fail("Failed to delete affiliation!\nPlease try again later."),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)


class AffiliationClient:
    """Operações do recurso Affiliation sobre um RequestExecutor."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def create_affiliation(self, affiliation: dict[str, Any]) -> RequestOutcome:
        return await self._executor.execute("POST", "", affiliation, table=CREATE_TABLE)

    async def fetch_all_affiliations(self) -> RequestOutcome:
        return await self._executor.execute("GET", "", table=LIST_ALL_TABLE)

    async def fetch_user_affiliations(self, owner_id: str | None) -> RequestOutcome:
        """Lista afiliações do usuário; 404 e status desconhecidos viram EmptyResult."""
        # Guard de configuração tem precedência sobre a validação do id
        if not self._executor.is_configured:
            return await self._executor.execute("GET", "", table=LIST_BY_OWNER_TABLE)
        if not owner_id:
            return DomainError(OWNER_ID_REQUIRED_MESSAGE)
        return await self._executor.execute(
            "GET", f"/{owner_id}", table=LIST_BY_OWNER_TABLE
        )

    async def end_affiliation(self, affiliation_id: str) -> RequestOutcome:
        return await self._executor.execute(
            "DELETE", f"/{affiliation_id}", table=END_TABLE
        )
