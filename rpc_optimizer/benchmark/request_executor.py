"""Handles individual request execution and timing."""
import asyncio
import time
from typing import Any, Dict, Optional

import httpx

from rpc_optimizer.chains.networks import Network
from rpc_optimizer.const import (
    ERROR_FIELD, EVM_BLOCK_NUMBER_METHOD, HEX_PREFIX, ID_FIELD, JSONRPC_FIELD, JSONRPC_VERSION, MESSAGE_FIELD,
    METHOD_FIELD, PARAMS_FIELD, RESULT_FIELD, RPC_ERROR_FALLBACK, SOLANA_SLOT_METHOD, TIMEOUT_ERROR
)
from rpc_optimizer.shared.httpx_util import HTTPX_Util
from rpc_optimizer.shared.logging import LoggingManager

from .constants import BenchmarkConstants
from .models import Endpoint, ProbeResult


logger = LoggingManager.get_logger(__name__)


def build_payload(network: Network) -> Dict[str, Any]:
    """JSON-RPC body asking the endpoint for its current height."""
    method = EVM_BLOCK_NUMBER_METHOD if network.is_evm else SOLANA_SLOT_METHOD
    return {JSONRPC_FIELD: JSONRPC_VERSION, METHOD_FIELD: method, PARAMS_FIELD: [], ID_FIELD: 1}


def parse_block_height(network: Network, result: Any) -> Optional[int]:
    """Extract the height from a ``result`` field; unexpected shapes yield None."""
    if result is None:
        return None

    if network.is_evm:
        if isinstance(result, str) and result.startswith(HEX_PREFIX):
            try:
                return int(result, 16)
            except ValueError:
                return None
        return None

    if isinstance(result, bool):
        return None
    if isinstance(result, int):
        return result
    if isinstance(result, float) and result.is_integer():
        return int(result)
    return None


class RequestExecutor:
    """Handles individual request execution and timing.

    A probe never raises: every failure is folded into the returned ProbeResult.
    """

    def __init__(self, default_timeout_ms: float = BenchmarkConstants.DEFAULT_TIMEOUT_MS):
        self.default_timeout_ms = default_timeout_ms

    async def send_request(self, client: httpx.AsyncClient, endpoint: Endpoint, timeout_ms: Optional[float] = None) -> ProbeResult:
        """
        Send a single height request to an endpoint and measure latency.

        Args:
            client: Shared async HTTP client.
            endpoint: Endpoint to probe.
            timeout_ms: Deadline for the whole request in milliseconds.

        Returns:
            ProbeResult describing health, latency and chain height.
        """
        timeout_ms = timeout_ms if timeout_ms is not None else self.default_timeout_ms
        timestamp = time.time()
        start_time = time.perf_counter()

        def elapsed_ms() -> float:
            return (time.perf_counter() - start_time) * 1000

        def failure(error: str) -> ProbeResult:
            logger.debug(f"Probe failed for {endpoint.url}: {error}")
            return ProbeResult(endpoint=endpoint, is_healthy=False, latency_ms=elapsed_ms(),
                               block_height=None, timestamp=timestamp, error=error)

        try:
            response = await asyncio.wait_for(
                client.post(
                    endpoint.url,
                    content=HTTPX_Util.encode_json_body(build_payload(endpoint.network)),
                    headers=HTTPX_Util.json_headers(),
                    timeout=HTTPX_Util.build_timeout(timeout_ms),
                ),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return failure(TIMEOUT_ERROR)
        except Exception as e:
            # Connection refused, DNS failure, malformed URL and the like
            return failure(HTTPX_Util.describe_error(e))

        latency_ms = elapsed_ms()

        if not response.is_success:
            return failure(f"HTTP {response.status_code}: {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as e:
            return failure(HTTPX_Util.describe_error(e))

        if isinstance(data, dict) and data.get(ERROR_FIELD) is not None:
            error = data[ERROR_FIELD]
            message = error.get(MESSAGE_FIELD) if isinstance(error, dict) else None
            return failure(message or RPC_ERROR_FALLBACK)

        result = data.get(RESULT_FIELD) if isinstance(data, dict) else None
        block_height = parse_block_height(endpoint.network, result)
        logger.debug(f"Probe ok for {endpoint.url}: {latency_ms:.1f}ms height={block_height}")

        return ProbeResult(endpoint=endpoint, is_healthy=True, latency_ms=latency_ms,
                           block_height=block_height, timestamp=timestamp)
