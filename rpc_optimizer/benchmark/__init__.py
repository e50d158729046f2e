"""Benchmark package initialization."""
from .models import BenchmarkOptions, BenchmarkResult, Endpoint, ProbeResult, Recommendation
from .constants import BenchmarkConstants
from .request_executor import RequestExecutor, build_payload, parse_block_height
from .latency_analyzer import LatencyAnalyzer
from .scorer import Scorer
from .concurrency_manager import ConcurrencyManager
from .rpc_benchmark import RpcBenchmark
from .recommender import Recommender
from .result_exporter import ResultExporter

__all__ = [
    'BenchmarkOptions',
    'BenchmarkResult',
    'Endpoint',
    'ProbeResult',
    'Recommendation',
    'BenchmarkConstants',
    'RequestExecutor',
    'build_payload',
    'parse_block_height',
    'LatencyAnalyzer',
    'Scorer',
    'ConcurrencyManager',
    'RpcBenchmark',
    'Recommender',
    'ResultExporter'
]
