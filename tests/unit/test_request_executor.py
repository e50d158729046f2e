"""Unit tests for the single-probe request executor."""

import asyncio

import httpx
import pytest

from rpc_optimizer.benchmark.request_executor import RequestExecutor, build_payload, parse_block_height
from rpc_optimizer.chains.networks import Network
from tests.conftest import make_endpoint, mock_transport
from tests.test_const import (
    EVM_REQUEST_BODY, MOCK_EVM_RESPONSE, MOCK_RPC_ERROR_RESPONSE, MOCK_SOLANA_RESPONSE, SOLANA_REQUEST_BODY,
    TEST_SOLANA_URL, TEST_URL, TIP_HEIGHT
)


class TestPayload:
    """Test request bodies and height parsing."""

    def test_evm_payload(self):
        assert build_payload(Network.ETHEREUM) == {"jsonrpc": "2.0", "method": "eth_blockNumber", "params": [], "id": 1}

    def test_solana_payload(self):
        assert build_payload(Network.SOLANA)["method"] == "getSlot"

    @pytest.mark.parametrize("result,expected", [
        ("0x3e8", 1000),
        ("0x0", 0),
        ("0xzz", None),
        ("1000", None),
        (1000, None),
        (None, None),
    ])
    def test_parse_evm_height(self, result, expected):
        assert parse_block_height(Network.ETHEREUM, result) == expected

    @pytest.mark.parametrize("result,expected", [
        (250000000, 250000000),
        (12.0, 12),
        (12.5, None),
        ("250000000", None),
        (True, None),
        (None, None),
    ])
    def test_parse_solana_height(self, result, expected):
        assert parse_block_height(Network.SOLANA, result) == expected


class TestRequestExecutor:
    """Test probe outcomes over a mocked transport."""

    async def _probe(self, routes, endpoint, timeout_ms=1000):
        async with httpx.AsyncClient(transport=mock_transport(routes)) as client:
            return await RequestExecutor().send_request(client, endpoint, timeout_ms)

    @pytest.mark.asyncio
    async def test_evm_success(self):
        endpoint = make_endpoint()
        result = await self._probe({TEST_URL: httpx.Response(200, json=MOCK_EVM_RESPONSE)}, endpoint)

        assert result.is_healthy is True
        assert result.block_height == TIP_HEIGHT
        assert result.error is None
        assert result.latency_ms >= 0
        assert result.endpoint is endpoint

    @pytest.mark.asyncio
    async def test_solana_success(self):
        endpoint = make_endpoint(url=TEST_SOLANA_URL, network="solana")
        result = await self._probe({TEST_SOLANA_URL: httpx.Response(200, json=MOCK_SOLANA_RESPONSE)}, endpoint)

        assert result.is_healthy is True
        assert result.block_height == 250000000

    @pytest.mark.asyncio
    async def test_request_wire_format(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=MOCK_EVM_RESPONSE)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await RequestExecutor().send_request(client, make_endpoint(), 1000)
            await RequestExecutor().send_request(client, make_endpoint(url=TEST_SOLANA_URL, network="solana"), 1000)

        assert seen[0].method == "POST"
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[0].content == EVM_REQUEST_BODY
        assert seen[1].content == SOLANA_REQUEST_BODY

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        result = await self._probe({TEST_URL: httpx.Response(503)}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "HTTP 503: Service Unavailable"
        assert result.block_height is None

    @pytest.mark.asyncio
    async def test_rpc_error(self):
        result = await self._probe({TEST_URL: httpx.Response(200, json=MOCK_RPC_ERROR_RESPONSE)}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "rate limited"

    @pytest.mark.asyncio
    async def test_rpc_error_without_message(self):
        body = {"jsonrpc": "2.0", "id": 1, "error": {"code": -32000}}
        result = await self._probe({TEST_URL: httpx.Response(200, json=body)}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "RPC error"

    @pytest.mark.asyncio
    async def test_empty_rpc_error_object(self):
        body = {"jsonrpc": "2.0", "id": 1, "error": {}, "result": "0x10"}
        result = await self._probe({TEST_URL: httpx.Response(200, json=body)}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "RPC error"
        assert result.block_height is None

    @pytest.mark.asyncio
    async def test_transport_timeout(self):
        result = await self._probe({TEST_URL: httpx.ReadTimeout("read timed out")}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "Timeout"

    @pytest.mark.asyncio
    async def test_deadline_exceeded(self):
        async def slow_handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json=MOCK_EVM_RESPONSE)

        async with httpx.AsyncClient(transport=httpx.MockTransport(slow_handler)) as client:
            result = await RequestExecutor().send_request(client, make_endpoint(), timeout_ms=20)

        assert result.is_healthy is False
        assert result.error == "Timeout"
        assert result.latency_ms < 1000

    @pytest.mark.asyncio
    async def test_connection_error(self):
        result = await self._probe({TEST_URL: httpx.ConnectError("connection refused")}, make_endpoint())

        assert result.is_healthy is False
        assert result.error == "connection refused"

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        result = await self._probe({TEST_URL: httpx.Response(200, content=b"<html>")}, make_endpoint())

        assert result.is_healthy is False
        assert result.error

    @pytest.mark.asyncio
    async def test_malformed_result_is_healthy_without_height(self):
        body = {"jsonrpc": "2.0", "id": 1, "result": "not-a-number"}
        result = await self._probe({TEST_URL: httpx.Response(200, json=body)}, make_endpoint())

        assert result.is_healthy is True
        assert result.block_height is None

    @pytest.mark.asyncio
    async def test_default_timeout_used(self):
        executor = RequestExecutor(default_timeout_ms=1234)
        async with httpx.AsyncClient(transport=mock_transport({TEST_URL: httpx.Response(200, json=MOCK_EVM_RESPONSE)})) as client:
            result = await executor.send_request(client, make_endpoint())
        assert result.is_healthy is True
