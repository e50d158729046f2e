"""Data models for the benchmarking system."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from rpc_optimizer.chains.networks import Network
from rpc_optimizer.const import DEFAULT_SAMPLES, DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, eq=False)
class Endpoint:
    """One JSON-RPC endpoint. Two endpoints are the same endpoint when their URLs match."""
    url: str
    name: str
    network: Network
    is_public: bool = True
    provider: Optional[str] = None

    def __post_init__(self):
        # Network identifiers are validated when the endpoint is built, not when it is probed
        object.__setattr__(self, "network", Network.parse(self.network))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "name": self.name,
            "network": self.network.value,
            "is_public": self.is_public,
            "provider": self.provider,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Endpoint":
        return cls(
            url=data["url"],
            name=data.get("name") or data["url"],
            network=data["network"],
            is_public=data.get("is_public", True),
            provider=data.get("provider"),
        )


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single timed request against an endpoint."""
    endpoint: Endpoint
    is_healthy: bool
    latency_ms: float
    block_height: Optional[int]
    timestamp: float
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint.to_dict(),
            "is_healthy": self.is_healthy,
            "latency_ms": self.latency_ms,
            "block_height": self.block_height,
            "timestamp": self.timestamp,
            "error": self.error,
        }


@dataclass(frozen=True)
class BenchmarkResult:
    """Aggregated statistics for one endpoint within one benchmark batch."""
    endpoint: Endpoint
    avg_latency_ms: float
    min_latency_ms: float
    max_latency_ms: float
    p95_latency_ms: float
    success_rate: float
    block_height: Optional[int]
    block_delay: int
    score: int
    sample_count: int
    timestamp: float

    @property
    def network(self) -> Network:
        return self.endpoint.network

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint.to_dict(),
            "avg_latency_ms": self.avg_latency_ms,
            "min_latency_ms": self.min_latency_ms,
            "max_latency_ms": self.max_latency_ms,
            "p95_latency_ms": self.p95_latency_ms,
            "success_rate": self.success_rate,
            "block_height": self.block_height,
            "block_delay": self.block_delay,
            "score": self.score,
            "sample_count": self.sample_count,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class Recommendation:
    """The best endpoint for a network plus up to three runners-up."""
    recommended: BenchmarkResult
    alternatives: List[BenchmarkResult]
    network: Network
    reason: str
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recommended": self.recommended.to_dict(),
            "alternatives": [alt.to_dict() for alt in self.alternatives],
            "network": self.network.value,
            "reason": self.reason,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class BenchmarkOptions:
    """Knobs for a benchmark run."""
    samples: int = DEFAULT_SAMPLES
    timeout_ms: float = DEFAULT_TIMEOUT_MS
    parallel: bool = True

    def __post_init__(self):
        if self.samples < 0:
            raise ValueError("samples must be >= 0")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")


EndpointLike = Union[Endpoint, Dict[str, Any]]
