"""Samples endpoints and scores them as one batch."""
import asyncio
import dataclasses
from typing import List, Optional

import httpx

from rpc_optimizer.shared.logging import LoggingManager

from .concurrency_manager import ConcurrencyManager
from .constants import BenchmarkConstants
from .latency_analyzer import LatencyAnalyzer
from .models import BenchmarkOptions, BenchmarkResult, Endpoint, ProbeResult
from .request_executor import RequestExecutor
from .scorer import Scorer


logger = LoggingManager.get_logger(__name__)


class RpcBenchmark:
    """Runs repeated probes per endpoint and ranks a batch of endpoints against each other."""

    def __init__(self, request_executor: Optional[RequestExecutor] = None,
                 sample_delay_ms: float = BenchmarkConstants.SAMPLE_DELAY_MS):
        self.request_executor = request_executor or RequestExecutor()
        self.latency_analyzer = LatencyAnalyzer()
        self.scorer = Scorer()
        self.sample_delay_ms = sample_delay_ms

    async def collect_samples(self, client: httpx.AsyncClient, endpoint: Endpoint, options: BenchmarkOptions) -> List[ProbeResult]:
        """Probe an endpoint ``options.samples`` times, one at a time, pausing between probes."""
        probes = []
        for i in range(options.samples):
            probes.append(await self.request_executor.send_request(client, endpoint, options.timeout_ms))
            if i < options.samples - 1 and self.sample_delay_ms > 0:
                await asyncio.sleep(self.sample_delay_ms / 1000)
        return probes

    async def benchmark_endpoint(self, client: httpx.AsyncClient, endpoint: Endpoint,
                                 options: Optional[BenchmarkOptions] = None) -> BenchmarkResult:
        """
        Benchmark a single endpoint.

        Args:
            client: Shared async HTTP client.
            endpoint: Endpoint to sample.
            options: Sample count and per-probe timeout.

        Returns:
            Unscored BenchmarkResult (block_delay and score are 0).
        """
        options = options or BenchmarkOptions()
        probes = await self.collect_samples(client, endpoint, options)
        result = self.latency_analyzer.summarize(endpoint, probes, options.timeout_ms, options.samples)
        logger.debug(
            f"Sampled {endpoint.url}: avg={result.avg_latency_ms}ms "
            f"success={result.success_rate} height={result.block_height}"
        )
        return result

    async def benchmark_endpoints(self, client: httpx.AsyncClient, endpoints: List[Endpoint],
                                  options: Optional[BenchmarkOptions] = None) -> List[BenchmarkResult]:
        """
        Benchmark a batch of endpoints and score them against each other.

        Args:
            client: Shared async HTTP client.
            endpoints: Endpoints to benchmark, usually all from one network.
            options: Sample count, timeout and parallel/sequential mode.

        Returns:
            Scored results in the same order as ``endpoints``.
        """
        options = options or BenchmarkOptions()
        concurrency_manager = ConcurrencyManager(parallel=options.parallel)

        async def worker(endpoint: Endpoint) -> BenchmarkResult:
            return await self.benchmark_endpoint(client, endpoint, options)

        logger.info(
            f"Benchmarking {len(endpoints)} endpoints "
            f"({options.samples} samples, {options.timeout_ms}ms timeout, "
            f"{'parallel' if options.parallel else 'sequential'})"
        )
        raw_results = await concurrency_manager.run(endpoints, worker)
        return self.finalize_batch(raw_results)

    def finalize_batch(self, results: List[BenchmarkResult]) -> List[BenchmarkResult]:
        """Fill in block delay and score once every result of the batch is known."""
        max_height = max((r.block_height for r in results if r.block_height is not None), default=0)

        finalized = []
        for result in results:
            if result.block_height is None:
                block_delay = BenchmarkConstants.MISSING_HEIGHT_DELAY
            else:
                block_delay = max(0, max_height - result.block_height)
            score = self.scorer.calculate_score(result, block_delay)
            finalized.append(dataclasses.replace(result, block_delay=block_delay, score=score))
        return finalized
