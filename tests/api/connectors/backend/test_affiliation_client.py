"""Testes do AffiliationClient."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.backend import (
    EMPTY_RESULT,
    NO_BACKEND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    AffiliationClient,
    DomainError,
    RequestExecutor,
    Success,
    TransportError,
)

BASE_URL = "https://backend.test/api/Affiliation"


def _client(status: int, body: object = None, requests: list | None = None) -> AffiliationClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    return AffiliationClient(
        RequestExecutor(BASE_URL, transport=httpx.MockTransport(handler))
    )


class TestFetchUserAffiliations:
    @pytest.mark.asyncio
    async def test_success(self) -> None:
        requests: list[httpx.Request] = []
        records = [{"id": "a1", "ownerId": "u1", "affiliateId": "c1"}]

        outcome = await _client(200, records, requests).fetch_user_affiliations("u1")

        assert outcome == Success(records)
        assert str(requests[0].url) == f"{BASE_URL}/u1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 418, 500])
    async def test_missing_and_unknown_statuses_are_empty(self, status: int) -> None:
        outcome = await _client(status).fetch_user_affiliations("u1")
        assert outcome == EMPTY_RESULT
        assert outcome.payload == []

    @pytest.mark.asyncio
    async def test_bad_request(self) -> None:
        outcome = await _client(400).fetch_user_affiliations("u1")
        assert outcome == DomainError("User ID cannot be null or empty!")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner_id", ["", None])
    async def test_missing_owner_short_circuits_without_io(self, owner_id: str | None) -> None:
        requests: list[httpx.Request] = []

        outcome = await _client(200, [], requests).fetch_user_affiliations(owner_id)

        assert outcome == DomainError("User ID is required!")
        assert requests == []

    @pytest.mark.asyncio
    async def test_configuration_guard_wins_over_owner_validation(self) -> None:
        client = AffiliationClient(RequestExecutor(None))
        outcome = await client.fetch_user_affiliations("")
        assert outcome == TransportError(NO_BACKEND_MESSAGE)


class TestOtherOperations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (200, Success({"id": "a1"})),
            (400, DomainError("Missing or invalid user information!")),
            (500, DomainError(SERVER_ERROR_MESSAGE)),
            (409, DomainError(UNEXPECTED_ERROR_MESSAGE)),
        ],
    )
    async def test_create(self, status: int, expected: object) -> None:
        requests: list[httpx.Request] = []
        client = _client(status, {"id": "a1"} if status == 200 else None, requests)

        outcome = await client.create_affiliation({"ownerId": "u1", "affiliateId": "c1"})

        assert outcome == expected
        assert requests[0].method == "POST"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (404, EMPTY_RESULT),
            (500, DomainError(SERVER_ERROR_MESSAGE)),
            (403, DomainError(UNEXPECTED_ERROR_MESSAGE)),
        ],
    )
    async def test_fetch_all(self, status: int, expected: object) -> None:
        assert await _client(status).fetch_all_affiliations() == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (200, Success("Affiliation ended successfully!")),
            (400, DomainError("User ID and Affiliate ID must be provided.")),
            (500, DomainError("Failed to delete affiliation!\nPlease try again later.")),
            (404, DomainError(UNEXPECTED_ERROR_MESSAGE)),
        ],
    )
    async def test_end(self, status: int, expected: object) -> None:
        requests: list[httpx.Request] = []

        outcome = await _client(status, None, requests).end_affiliation("a1")

        assert outcome == expected
        assert requests[0].method == "DELETE"
        assert str(requests[0].url) == f"{BASE_URL}/a1"
