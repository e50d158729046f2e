"""Analyzes and computes latency statistics."""
import math
import time
from typing import List, Sequence

import numpy as np

from .constants import BenchmarkConstants
from .models import BenchmarkResult, Endpoint, ProbeResult


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative inputs, unlike the built-in round()."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def compute_percentile(sorted_latencies: Sequence[float], percentile: float = BenchmarkConstants.PERCENTILE) -> float:
        """
        Nearest-rank percentile.

        Args:
            sorted_latencies: Latencies sorted ascending.
            percentile: Percentile in (0, 100].

        Returns:
            Value at rank ceil(p/100 * n) - 1, or 0.0 for an empty list.
        """
        if len(sorted_latencies) == 0:
            return 0.0
        index = math.ceil((percentile / 100) * len(sorted_latencies)) - 1
        return float(sorted_latencies[max(0, index)])

    @staticmethod
    def summarize(endpoint: Endpoint, probes: List[ProbeResult], timeout_ms: float, sample_count: int) -> BenchmarkResult:
        """
        Fold a run of probes into a BenchmarkResult.

        Block delay and score stay at 0; they need the rest of the batch.

        Args:
            endpoint: Endpoint the probes were sent to.
            probes: Probe results in the order they were taken.
            timeout_ms: Per-probe timeout, used as min/max latency when nothing succeeded.
            sample_count: Number of samples requested.

        Returns:
            BenchmarkResult with rounded statistics.
        """
        healthy = [probe for probe in probes if probe.is_healthy]
        latencies = np.sort(np.array([probe.latency_ms for probe in healthy], dtype=float))
        heights = [probe.block_height for probe in healthy if probe.block_height is not None]

        success_rate = len(healthy) / len(probes) if probes else 0.0
        if latencies.size > 0:
            avg_latency = float(np.mean(latencies))
            min_latency = float(latencies[0])
            max_latency = float(latencies[-1])
        else:
            avg_latency = 0.0
            min_latency = float(timeout_ms)
            max_latency = float(timeout_ms)
        p95_latency = LatencyAnalyzer.compute_percentile(latencies)

        digits = BenchmarkConstants.ROUND_DIGITS
        return BenchmarkResult(
            endpoint=endpoint,
            avg_latency_ms=round_half_up(avg_latency, digits),
            min_latency_ms=round_half_up(min_latency, digits),
            max_latency_ms=round_half_up(max_latency, digits),
            p95_latency_ms=round_half_up(p95_latency, digits),
            success_rate=round_half_up(success_rate, digits),
            block_height=max(heights) if heights else None,
            block_delay=0,
            score=0,
            sample_count=sample_count,
            timestamp=time.time(),
        )
