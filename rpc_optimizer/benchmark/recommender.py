"""Picks the best endpoint from scored benchmark results."""
import time
from typing import Any, Dict, List, Optional, Union

from rpc_optimizer.chains.networks import Network

from .constants import BenchmarkConstants
from .latency_analyzer import round_half_up
from .models import BenchmarkResult, Recommendation


class Recommender:
    """Builds recommendations with a short human readable justification."""

    @staticmethod
    def generate_reason(result: BenchmarkResult) -> str:
        """Explain why a result was picked, e.g. "Top performer, 100% reliability"."""
        reasons: List[str] = []

        if result.success_rate == 1:
            reasons.append("100% reliability")
        elif result.success_rate >= 0.9:
            reasons.append(f"{int(round_half_up(result.success_rate * 100))}% success rate")

        if result.avg_latency_ms < 100:
            reasons.append("excellent latency (<100ms)")
        elif result.avg_latency_ms < 200:
            reasons.append("good latency (<200ms)")

        if result.block_delay == 0:
            reasons.append("up-to-date block height")
        elif result.block_delay <= 2:
            reasons.append(f"only {result.block_delay} block(s) behind")

        if result.score >= 90:
            reasons.insert(0, "Top performer")
        elif result.score >= 80:
            reasons.insert(0, "Strong performer")

        return ", ".join(reasons) if reasons else "Best available option"

    @staticmethod
    def recommend_best(results: List[BenchmarkResult], network: Union[Network, str]) -> Optional[Recommendation]:
        """
        Recommend the best endpoint of a network.

        Args:
            results: Scored results, possibly spanning several networks.
            network: Network to recommend for.

        Returns:
            Recommendation, or None when no endpoint of the network answered at all.
        """
        network = Network.parse(network)
        valid = [r for r in results if r.success_rate > 0 and r.endpoint.network is network]
        # sorted() is stable with reverse=True, equal scores keep their input order
        ranked = sorted(valid, key=lambda r: r.score, reverse=True)
        if not ranked:
            return None

        recommended = ranked[0]
        return Recommendation(
            recommended=recommended,
            alternatives=ranked[1:1 + BenchmarkConstants.MAX_ALTERNATIVES],
            network=network,
            reason=Recommender.generate_reason(recommended),
            timestamp=time.time(),
        )

    @staticmethod
    def recommend_all(results: List[BenchmarkResult]) -> Dict[Network, Optional[Recommendation]]:
        """One recommendation per network present in ``results``, in first-seen order."""
        networks = list(dict.fromkeys(r.endpoint.network for r in results))
        return {network: Recommender.recommend_best(results, network) for network in networks}

    @staticmethod
    def format_recommendation(recommendation: Recommendation) -> Dict[str, Any]:
        """Compact, JSON friendly view of a recommendation."""
        rec = recommendation.recommended
        return {
            "network": recommendation.network.value,
            "recommended": {
                "url": rec.endpoint.url,
                "name": rec.endpoint.name,
                "provider": rec.endpoint.provider,
                "score": rec.score,
                "latency_ms": rec.avg_latency_ms,
                "success_rate": f"{int(round_half_up(rec.success_rate * 100))}%",
            },
            "alternatives": [
                {
                    "url": alt.endpoint.url,
                    "name": alt.endpoint.name,
                    "score": alt.score,
                    "latency_ms": alt.avg_latency_ms,
                }
                for alt in recommendation.alternatives
            ],
            "reason": recommendation.reason,
        }
