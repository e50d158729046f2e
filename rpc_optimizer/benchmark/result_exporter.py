"""Handles exporting benchmark results to various formats."""
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from rpc_optimizer.chains.networks import Network
from rpc_optimizer.shared.logging import LoggingManager

from .models import BenchmarkResult, ProbeResult, Recommendation


logger = LoggingManager.get_logger(__name__)

BENCHMARK_COLUMNS = [
    "network", "name", "provider", "url", "score", "avg_latency_ms", "min_latency_ms", "max_latency_ms",
    "p95_latency_ms", "success_rate", "block_height", "block_delay", "sample_count", "timestamp",
]


class ResultExporter:
    """Handles exporting benchmark results to various formats."""

    @staticmethod
    def to_dataframe(results: List[BenchmarkResult], sort_by_score: bool = True) -> pd.DataFrame:
        """
        Flatten benchmark results into a DataFrame, one row per endpoint.

        Args:
            results: Scored benchmark results.
            sort_by_score: Order rows best-first (stable for equal scores).

        Returns:
            DataFrame with BENCHMARK_COLUMNS.
        """
        rows = [
            {
                "network": r.endpoint.network.value,
                "name": r.endpoint.name,
                "provider": r.endpoint.provider,
                "url": r.endpoint.url,
                "score": r.score,
                "avg_latency_ms": r.avg_latency_ms,
                "min_latency_ms": r.min_latency_ms,
                "max_latency_ms": r.max_latency_ms,
                "p95_latency_ms": r.p95_latency_ms,
                "success_rate": r.success_rate,
                "block_height": r.block_height,
                "block_delay": r.block_delay,
                "sample_count": r.sample_count,
                "timestamp": r.timestamp,
            }
            for r in results
        ]
        df = pd.DataFrame(rows, columns=BENCHMARK_COLUMNS)
        if sort_by_score and not df.empty:
            df = df.sort_values(by="score", ascending=False, kind="stable").reset_index(drop=True)
        return df

    @staticmethod
    def health_to_dataframe(results: List[ProbeResult]) -> pd.DataFrame:
        """Flatten single-shot health checks, fastest first."""
        rows = [
            {
                "name": r.endpoint.name,
                "url": r.endpoint.url,
                "is_healthy": r.is_healthy,
                "latency_ms": r.latency_ms,
                "block_height": r.block_height,
                "error": r.error,
            }
            for r in results
        ]
        df = pd.DataFrame(rows, columns=["name", "url", "is_healthy", "latency_ms", "block_height", "error"])
        if not df.empty:
            df = df.sort_values(by="latency_ms", kind="stable").reset_index(drop=True)
        return df

    @staticmethod
    def save_results(results: List[BenchmarkResult], output_path: Union[Path, str]) -> None:
        """
        Save benchmark results to CSV.

        Args:
            results: Scored benchmark results.
            output_path: Path to save CSV.
        """
        if not results:
            logger.warning("No benchmark results available for saving")
            return
        df = ResultExporter.to_dataframe(results)
        df.to_csv(output_path, index=False)
        logger.info(f"CSV saved: {output_path}")

    @staticmethod
    def recommendations_to_dataframe(recommendations: Dict[Network, Optional[Recommendation]]) -> pd.DataFrame:
        """One row per network; networks without a recommendation keep empty cells."""
        rows = []
        for network, rec in recommendations.items():
            best = rec.recommended if rec else None
            rows.append({
                "network": network.value,
                "url": best.endpoint.url if best else None,
                "name": best.endpoint.name if best else None,
                "score": best.score if best else None,
                "avg_latency_ms": best.avg_latency_ms if best else None,
                "alternatives": len(rec.alternatives) if rec else 0,
                "reason": rec.reason if rec else None,
            })
        return pd.DataFrame(rows, columns=["network", "url", "name", "score", "avg_latency_ms", "alternatives", "reason"])
