"""RPC Optimizer: benchmarks blockchain JSON-RPC endpoints and recommends the best one per network."""
from .exceptions import EndpointSourceError, UnknownNetworkError
from .chains.networks import Network, NetworkMetadata, NETWORK_METADATA
from .benchmark.models import BenchmarkOptions, BenchmarkResult, Endpoint, ProbeResult, Recommendation
from .optimizer import RpcOptimizer, create_optimizer

__all__ = [
    'EndpointSourceError',
    'UnknownNetworkError',
    'Network',
    'NetworkMetadata',
    'NETWORK_METADATA',
    'BenchmarkOptions',
    'BenchmarkResult',
    'Endpoint',
    'ProbeResult',
    'Recommendation',
    'RpcOptimizer',
    'create_optimizer'
]
