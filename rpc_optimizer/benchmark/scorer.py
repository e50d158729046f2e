"""Turns benchmark statistics into a single 0-100 score."""
import math
from typing import Dict, Optional

from .constants import BenchmarkConstants
from .models import BenchmarkResult


class Scorer:
    """Weighted blend of latency, reliability, freshness and consistency sub-scores."""

    @staticmethod
    def sub_scores(result: BenchmarkResult, block_delay: Optional[int] = None) -> Dict[str, float]:
        """
        Compute the four unweighted sub-scores, each in [0, 100].

        Args:
            result: Aggregated benchmark result.
            block_delay: Overrides ``result.block_delay`` when given.

        Returns:
            Mapping of sub-score name to value.
        """
        c = BenchmarkConstants
        delay = result.block_delay if block_delay is None else block_delay
        spread = result.max_latency_ms - result.min_latency_ms
        return {
            "latency": max(0.0, 100 - result.avg_latency_ms / c.LATENCY_DIVISOR),
            "reliability": result.success_rate * 100,
            "freshness": max(0.0, 100 - delay * c.BLOCK_DELAY_PENALTY),
            "consistency": max(0.0, 100 - spread / c.CONSISTENCY_DIVISOR),
        }

    @staticmethod
    def calculate_score(result: BenchmarkResult, block_delay: Optional[int] = None) -> int:
        """Overall score, rounded half-up and clamped to [0, 100]."""
        c = BenchmarkConstants
        scores = Scorer.sub_scores(result, block_delay)
        total = (
            scores["latency"] * c.LATENCY_WEIGHT
            + scores["reliability"] * c.SUCCESS_WEIGHT
            + scores["freshness"] * c.BLOCK_DELAY_WEIGHT
            + scores["consistency"] * c.CONSISTENCY_WEIGHT
        )
        clamped = max(c.MIN_SCORE, min(c.MAX_SCORE, total))
        return int(math.floor(clamped + 0.5))
