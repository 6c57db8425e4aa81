"""Testes do RequestExecutor: guard de configuração, timeout e falhas de transporte."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from api.connectors.backend import (
    NO_BACKEND_MESSAGE,
    TIMEOUT_MESSAGE,
    DomainError,
    EmptyResult,
    HttpClientConfig,
    OutcomeKind,
    RequestExecutor,
    RequestTimeout,
    StatusTable,
    Success,
    TransportError,
    failure_message,
    is_failure,
)
from api.connectors.backend.status_tables import decode_body, fail, payload

BASE_URL = "https://backend.test/api/User"

TABLE = StatusTable(
    rules={200: payload(), 400: fail("Bad request!")},
    default=fail("Unexpected!"),
)


def _executor(handler, timeout: float = 5.0, base_url: str = BASE_URL) -> RequestExecutor:
    return RequestExecutor(
        base_url,
        config=HttpClientConfig(timeout_seconds=timeout),
        transport=httpx.MockTransport(handler),
    )


class TestConfigurationGuard:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("base_url", ["", None])
    async def test_unconfigured_backend_returns_immediately_without_io(
        self, base_url: str | None
    ) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        executor = _executor(handler, base_url=base_url)

        first = await executor.execute("GET", "/all", table=TABLE)
        second = await executor.execute("GET", "/all", table=TABLE)

        assert first == second == TransportError(NO_BACKEND_MESSAGE)
        assert calls == []
        assert executor.is_configured is False


class TestStatusResolution:
    @pytest.mark.asyncio
    async def test_request_shape(self) -> None:
        seen: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers.get("content-type")
            seen["body"] = request.read()
            return httpx.Response(200, json={"id": "abc"})

        outcome = await _executor(handler).execute(
            "POST", "/login", {"email": "a@b.c"}, table=TABLE
        )

        assert outcome == Success({"id": "abc"})
        assert seen["method"] == "POST"
        assert seen["url"] == f"{BASE_URL}/login"
        assert seen["content_type"] == "application/json"
        assert json.loads(seen["body"]) == {"email": "a@b.c"}

    @pytest.mark.asyncio
    async def test_listed_and_default_status(self) -> None:
        statuses = iter([400, 418])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        executor = _executor(handler)

        assert await executor.execute("GET", table=TABLE) == DomainError("Bad request!")
        assert await executor.execute("GET", table=TABLE) == DomainError("Unexpected!")

    @pytest.mark.asyncio
    async def test_without_table_any_status_is_empty(self) -> None:
        executor = _executor(lambda request: httpx.Response(204))
        assert await executor.execute("DELETE", "/x") == EmptyResult()

    def test_url_for(self) -> None:
        executor = RequestExecutor(f"{BASE_URL}/")
        assert executor.base_url == BASE_URL
        assert executor.url_for() == BASE_URL
        assert executor.url_for("abc") == f"{BASE_URL}/abc"
        assert executor.url_for("/abc") == f"{BASE_URL}/abc"


class TestTimeout:
    @pytest.mark.asyncio
    async def test_slow_backend_becomes_request_timeout(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={"late": True})

        outcome = await _executor(handler, timeout=0.05).execute("GET", table=TABLE)

        assert outcome == RequestTimeout()
        assert outcome.message == TIMEOUT_MESSAGE

    @pytest.mark.asyncio
    async def test_httpx_timeout_exception_becomes_request_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        outcome = await _executor(handler).execute("GET", table=TABLE)

        assert isinstance(outcome, RequestTimeout)

    @pytest.mark.asyncio
    async def test_timer_is_disarmed_after_completion(self) -> None:
        """Após o sucesso, o timer da chamada não dispara mais tarde."""
        executor = _executor(lambda request: httpx.Response(200, json=[1]), timeout=0.05)

        outcome = await executor.execute("GET", table=TABLE)
        await asyncio.sleep(0.1)

        assert outcome == Success([1])
        assert asyncio.current_task().cancelling() == 0


class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_connection_error_carries_prefix_and_original_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        outcome = await _executor(handler).execute("GET", table=TABLE)

        assert outcome == TransportError("Internal server error!\nboom")

    @pytest.mark.asyncio
    async def test_invalid_json_is_transport_error(self) -> None:
        executor = _executor(lambda request: httpx.Response(200, content=b"<html>"))

        outcome = await executor.execute("GET", table=TABLE)

        assert isinstance(outcome, TransportError)
        assert outcome.message.startswith("Internal server error!\n")

    @pytest.mark.asyncio
    async def test_custom_prefix(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        table = StatusTable(error_prefix="An error occurred!")
        outcome = await _executor(handler).execute("GET", table=table)

        assert outcome == TransportError("An error occurred!\nrefused")


class TestOutcomes:
    def test_kinds_and_failure_helpers(self) -> None:
        assert Success(1).kind == OutcomeKind.SUCCESS
        assert EmptyResult().payload == []
        assert is_failure(Success(None)) is False
        assert is_failure(EmptyResult()) is False
        assert is_failure(DomainError("x")) is True
        assert failure_message(RequestTimeout()) == TIMEOUT_MESSAGE
        assert failure_message(Success("ok")) is None

    def test_decode_body_empty_is_none(self) -> None:
        assert decode_body(httpx.Response(200, content=b"")) is None
        assert decode_body(httpx.Response(200, content=b"  ")) is None
        assert decode_body(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_payload_rule_empty_handling(self) -> None:
        empty_response = httpx.Response(200, content=b"")
        assert payload()(empty_response) == Success(None)
        assert payload(default=[])(empty_response) == Success([])
        assert payload(if_empty="Nada!")(empty_response) == DomainError("Nada!")
        assert payload(if_empty="Nada!")(httpx.Response(200, json={})) == DomainError("Nada!")
