"""Endpoint inventory and benchmark orchestration."""
import asyncio
from typing import Callable, Dict, Iterable, List, Optional, Union

import httpx

from rpc_optimizer.benchmark.models import (
    BenchmarkOptions, BenchmarkResult, Endpoint, EndpointLike, ProbeResult, Recommendation
)
from rpc_optimizer.benchmark.recommender import Recommender
from rpc_optimizer.benchmark.request_executor import RequestExecutor
from rpc_optimizer.benchmark.rpc_benchmark import RpcBenchmark
from rpc_optimizer.chains.chainlist_fetcher import ChainListFetcher
from rpc_optimizer.chains.endpoints import LLAMA_RPC_ENDPOINTS, PUBLIC_RPC_ENDPOINTS, get_supported_networks
from rpc_optimizer.chains.networks import Network
from rpc_optimizer.shared.cache import TtlCache
from rpc_optimizer.shared.config import Config
from rpc_optimizer.shared.httpx_util import HTTPX_Util
from rpc_optimizer.shared.logging import LoggingManager


logger = LoggingManager.get_logger(__name__)

NetworkLike = Union[Network, str]


def dedupe_endpoints(endpoints: Iterable[Endpoint]) -> List[Endpoint]:
    """Drop endpoints whose URL was already seen; the first occurrence wins."""
    seen = set()
    unique = []
    for endpoint in endpoints:
        if endpoint.url in seen:
            continue
        seen.add(endpoint.url)
        unique.append(endpoint)
    return unique


class RpcOptimizer:
    """Owns the endpoint inventory and the benchmark cache, and exposes the benchmarking API.

    Usage::

        async with RpcOptimizer() as optimizer:
            recommendation = await optimizer.get_best_rpc("ethereum")
    """

    def __init__(self, config: Optional[Config] = None,
                 custom_endpoints: Optional[List[EndpointLike]] = None,
                 request_executor: Optional[RequestExecutor] = None,
                 chainlist_fetcher: Optional[ChainListFetcher] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 clock: Optional[Callable[[], float]] = None):
        self.config = config or Config()
        self._networks = [Network.parse(n) for n in self.config.networks]
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        cache_kwargs = {"clock": clock} if clock is not None else {}
        self.cache: TtlCache[List[BenchmarkResult]] = TtlCache(default_ttl=self.config.cache_ttl, **cache_kwargs)

        self.request_executor = request_executor or RequestExecutor(self.config.default_timeout_ms)
        self.benchmark = RpcBenchmark(self.request_executor, sample_delay_ms=self.config.sample_delay_ms)
        self.recommender = Recommender()
        self.chainlist_fetcher = chainlist_fetcher or ChainListFetcher(
            url=self.config.chainlist_url, cache_ttl=self.config.chainlist_cache_ttl, transport=transport
        )

        custom = [e if isinstance(e, Endpoint) else Endpoint.from_dict(e) for e in (custom_endpoints or [])]
        self._endpoints = dedupe_endpoints([*PUBLIC_RPC_ENDPOINTS, *LLAMA_RPC_ENDPOINTS, *custom])
        self._dynamic_endpoints: Dict[Network, List[Endpoint]] = {}
        self.use_dynamic = self.config.use_dynamic_fetch

    # ------------------------------------------------------------------ client lifecycle
    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = HTTPX_Util.create_async_client(self.config.default_timeout_ms, self._transport)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "RpcOptimizer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ inventory
    def default_options(self, **overrides) -> BenchmarkOptions:
        """Benchmark options from config, with explicit overrides; None overrides are ignored."""
        values = {
            "samples": self.config.default_samples,
            "timeout_ms": self.config.default_timeout_ms,
            "parallel": self.config.parallel,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return BenchmarkOptions(**values)

    def set_dynamic_fetch(self, enabled: bool) -> None:
        """Include (or stop including) endpoints fetched from ChainList."""
        self.use_dynamic = enabled
        if not enabled:
            self._dynamic_endpoints.clear()

    async def refresh_endpoints(self, network: NetworkLike) -> List[Endpoint]:
        """
        Fetch fresh endpoints for one network from ChainList.

        When dynamic fetch is enabled the network's cached benchmark is dropped,
        since it no longer covers the full inventory.

        Raises:
            EndpointSourceError: If ChainList is unreachable and nothing is cached.
        """
        network = Network.parse(network)
        endpoints = await self.chainlist_fetcher.fetch_by_network(network)
        self._dynamic_endpoints[network] = endpoints
        if self.use_dynamic:
            self.cache.invalidate(network)
        logger.info(f"Loaded {len(endpoints)} dynamic endpoints for {network}")
        return endpoints

    async def refresh_all_endpoints(self) -> List[Endpoint]:
        """Fetch fresh endpoints for every EVM network from ChainList."""
        endpoints = await self.chainlist_fetcher.fetch_all()
        grouped: Dict[Network, List[Endpoint]] = {}
        for endpoint in endpoints:
            grouped.setdefault(endpoint.network, []).append(endpoint)
        self._dynamic_endpoints.update(grouped)
        if self.use_dynamic:
            for network in grouped:
                self.cache.invalidate(network)
        logger.info(f"Loaded {len(endpoints)} dynamic endpoints across {len(grouped)} networks")
        return endpoints

    def get_endpoints(self, network: Optional[NetworkLike] = None) -> List[Endpoint]:
        """
        All known endpoints, deduplicated by URL.

        Args:
            network: Restrict to one network.

        Returns:
            Static and custom endpoints, followed by dynamic ones when enabled.
        """
        network = Network.parse(network) if network is not None else None
        endpoints = list(self._endpoints)

        if self.use_dynamic:
            if network is not None:
                endpoints.extend(self._dynamic_endpoints.get(network, []))
            else:
                for dynamic in self._dynamic_endpoints.values():
                    endpoints.extend(dynamic)

        endpoints = dedupe_endpoints(endpoints)
        if network is not None:
            return [e for e in endpoints if e.network is network]
        return endpoints

    def get_supported_networks(self) -> List[Network]:
        return get_supported_networks()

    def get_configured_networks(self) -> List[Network]:
        """Networks covered by benchmark_all: the configured subset, or every supported network."""
        return list(self._networks) if self._networks else self.get_supported_networks()

    def add_endpoint(self, endpoint: EndpointLike) -> bool:
        """Add a custom endpoint. Returns False when its URL is already known."""
        endpoint = endpoint if isinstance(endpoint, Endpoint) else Endpoint.from_dict(endpoint)
        if any(e.url == endpoint.url for e in self._endpoints):
            logger.debug(f"Ignoring duplicate endpoint {endpoint.url}")
            return False
        self._endpoints.append(endpoint)
        return True

    # ------------------------------------------------------------------ health checks
    async def check_endpoint(self, endpoint: Endpoint, timeout_ms: Optional[float] = None) -> ProbeResult:
        """Single probe against one endpoint."""
        return await self.request_executor.send_request(self.client, endpoint, timeout_ms or self.config.default_timeout_ms)

    async def check_network(self, network: NetworkLike, timeout_ms: Optional[float] = None) -> List[ProbeResult]:
        """Single concurrent probe of every endpoint of a network. Not cached, not scored."""
        endpoints = self.get_endpoints(network)
        timeout_ms = timeout_ms or self.config.default_timeout_ms
        return list(await asyncio.gather(*(self.check_endpoint(e, timeout_ms) for e in endpoints)))

    async def find_fastest(self, network: NetworkLike,
                           timeout_ms: Optional[float] = None) -> Optional[Endpoint]:
        """Lowest-latency healthy endpoint from one quick health pass, or None."""
        results = await self.check_network(network, timeout_ms or self.config.fastest_timeout_ms)
        healthy = sorted((r for r in results if r.is_healthy), key=lambda r: r.latency_ms)
        return healthy[0].endpoint if healthy else None

    # ------------------------------------------------------------------ benchmarks
    async def benchmark_network(self, network: NetworkLike,
                                options: Optional[BenchmarkOptions] = None) -> List[BenchmarkResult]:
        """
        Full benchmark of one network, served from cache while fresh.

        Concurrent callers that both miss the cache both run the benchmark; the
        later one to finish overwrites the cache entry.

        Args:
            network: Network to benchmark.
            options: Samples, timeout and parallelism; defaults from config.

        Returns:
            Scored results for every endpoint of the network.
        """
        network = Network.parse(network)
        cached = self.cache.get(network)
        if cached is not None:
            logger.info(f"Using cached benchmark for {network} (age {self.cache.age(network):.0f}s)")
            return list(cached)

        options = options or self.default_options()
        endpoints = self.get_endpoints(network)
        results = await self.benchmark.benchmark_endpoints(self.client, endpoints, options)
        self.cache.put(network, list(results))
        return results

    async def benchmark_all(self, options: Optional[BenchmarkOptions] = None) -> List[BenchmarkResult]:
        """Benchmark every configured network, one network at a time."""
        all_results: List[BenchmarkResult] = []
        for network in self.get_configured_networks():
            all_results.extend(await self.benchmark_network(network, options))
        return all_results

    async def get_best_rpc(self, network: NetworkLike,
                           options: Optional[BenchmarkOptions] = None) -> Optional[Recommendation]:
        """Recommendation for one network, or None when no endpoint answered."""
        network = Network.parse(network)
        results = await self.benchmark_network(network, options)
        recommendation = self.recommender.recommend_best(results, network)
        if recommendation is None:
            logger.warning(f"No healthy endpoints for {network}")
        return recommendation

    async def get_all_recommendations(self, options: Optional[BenchmarkOptions] = None) -> Dict[Network, Optional[Recommendation]]:
        """One recommendation (or None) per configured network."""
        recommendations: Dict[Network, Optional[Recommendation]] = {}
        for network in self.get_configured_networks():
            recommendations[network] = await self.get_best_rpc(network, options)
        return recommendations

    def clear_cache(self) -> None:
        self.cache.clear()


def create_optimizer(config: Optional[Config] = None, **kwargs) -> RpcOptimizer:
    """Create a new optimizer instance."""
    return RpcOptimizer(config, **kwargs)
