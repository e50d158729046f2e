"""Shared test configuration and fixtures for all tests."""

import time
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from rpc_optimizer.benchmark.models import BenchmarkResult, Endpoint, ProbeResult
from rpc_optimizer.shared.config import Config
from .test_const import TEST_NAME, TEST_NETWORK, TEST_PROVIDER, TEST_URL

# (is_healthy, latency_ms, block_height) for one scripted probe
ScriptedProbe = Tuple[bool, float, Optional[int]]


def make_endpoint(url: str = TEST_URL, network: str = TEST_NETWORK, name: str = TEST_NAME,
                  provider: str = TEST_PROVIDER) -> Endpoint:
    """Build an endpoint with sensible test defaults."""
    return Endpoint(url=url, name=name, network=network, provider=provider)


def make_result(endpoint: Optional[Endpoint] = None, avg: float = 50.0, min_latency: float = 50.0,
                max_latency: float = 50.0, p95: float = 50.0, success_rate: float = 1.0,
                block_height: Optional[int] = 100, block_delay: int = 0, score: int = 0,
                sample_count: int = 5) -> BenchmarkResult:
    """Build a benchmark result with sensible test defaults."""
    return BenchmarkResult(
        endpoint=endpoint or make_endpoint(),
        avg_latency_ms=avg,
        min_latency_ms=min_latency,
        max_latency_ms=max_latency,
        p95_latency_ms=p95,
        success_rate=success_rate,
        block_height=block_height,
        block_delay=block_delay,
        score=score,
        sample_count=sample_count,
        timestamp=time.time(),
    )


class ScriptedExecutor:
    """Request executor stand-in that replays scripted probes per URL.

    Once a URL's script is exhausted its last entry repeats. URLs without a script
    replay ``default`` (a timeout unless given).
    """

    def __init__(self, scripts: Dict[str, List[ScriptedProbe]], default: Optional[List[ScriptedProbe]] = None):
        self.scripts = scripts
        self.default = default or [(False, 5000.0, None)]
        self.calls: List[Tuple[str, Optional[float]]] = []

    async def send_request(self, client, endpoint: Endpoint, timeout_ms: Optional[float] = None) -> ProbeResult:
        index = self.call_count(endpoint.url)
        self.calls.append((endpoint.url, timeout_ms))
        script = self.scripts.get(endpoint.url, self.default)
        is_healthy, latency_ms, block_height = script[min(index, len(script) - 1)]
        return ProbeResult(
            endpoint=endpoint,
            is_healthy=is_healthy,
            latency_ms=latency_ms,
            block_height=block_height if is_healthy else None,
            timestamp=time.time(),
            error=None if is_healthy else "Timeout",
        )

    def call_count(self, url: str) -> int:
        return sum(1 for called, _ in self.calls if called == url)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def mock_transport(routes: Dict[str, object]) -> httpx.MockTransport:
    """MockTransport answering per URL.

    Routes are matched on host. A route value is either an ``httpx.Response`` or an
    exception instance to raise.
    """
    by_host = {httpx.URL(url).host: outcome for url, outcome in routes.items()}

    def handler(request: httpx.Request) -> httpx.Response:
        outcome = by_host[request.url.host]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return httpx.MockTransport(handler)


@pytest.fixture
def endpoint():
    """Default EVM endpoint fixture."""
    return make_endpoint()


@pytest.fixture
def fake_clock():
    """Manually advanced clock fixture."""
    return FakeClock()


@pytest.fixture
def optimizer_config():
    """Config with no sample pacing and every network enabled."""
    return Config(sample_delay_ms=0, default_samples=3, default_timeout_ms=1000, networks=[])


@pytest.fixture
def mock_optimizer():
    """Mock optimizer fixture with async operations."""
    optimizer = MagicMock()
    optimizer.check_network = AsyncMock(return_value=[])
    optimizer.find_fastest = AsyncMock(return_value=None)
    optimizer.benchmark_network = AsyncMock(return_value=[])
    optimizer.get_best_rpc = AsyncMock(return_value=None)
    optimizer.refresh_endpoints = AsyncMock(return_value=[])
    optimizer.aclose = AsyncMock()
    return optimizer

