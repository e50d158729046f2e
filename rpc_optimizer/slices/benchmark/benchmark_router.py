from typing import Any, Dict, Optional

from fastapi import HTTPException, Query

from rpc_optimizer.benchmark.recommender import Recommender
from rpc_optimizer.const import HTTP_BAD_GATEWAY, HTTP_NOT_FOUND
from rpc_optimizer.exceptions import EndpointSourceError
from rpc_optimizer.slices.base_router import BaseRouter


class BenchmarkRouter(BaseRouter):
    """Router for full benchmarks and recommendations."""

    tag = "benchmark"

    def add_routes(self):
        self.router.get("/benchmark/{network}", response_model=Dict[str, Any])(self.benchmark)
        self.router.get("/best/{network}", response_model=Dict[str, Any])(self.best)

    async def benchmark(self, network: str,
                        samples: Optional[int] = Query(None, ge=0),
                        timeout_ms: Optional[int] = Query(None, gt=0),
                        parallel: Optional[bool] = None,
                        refresh: bool = False) -> Dict[str, Any]:
        """Benchmark every endpoint of a network; results best-first.

        With ``refresh`` dynamic fetch is switched on and the network's endpoints are
        reloaded from ChainList first.
        """
        network = self.parse_network(network)
        options = self.build_options(samples, timeout_ms, parallel)
        try:
            if refresh:
                self.optimizer.set_dynamic_fetch(True)
                await self.optimizer.refresh_endpoints(network)
            results = await self.optimizer.benchmark_network(network, options)
        except EndpointSourceError as e:
            self.logger.error(f"Endpoint source unavailable for {network}: {str(e)}")
            raise HTTPException(status_code=HTTP_BAD_GATEWAY, detail=str(e))

        results = sorted(results, key=lambda r: r.score, reverse=True)
        self.logger.info(f"Benchmark for {network} returned {len(results)} results")
        return {"network": network.value, "results": [r.to_dict() for r in results]}

    async def best(self, network: str,
                   samples: Optional[int] = Query(None, ge=0),
                   timeout_ms: Optional[int] = Query(None, gt=0)) -> Dict[str, Any]:
        """Recommended endpoint for a network."""
        network = self.parse_network(network)
        options = self.build_options(samples, timeout_ms)
        recommendation = await self.optimizer.get_best_rpc(network, options)
        if recommendation is None:
            raise HTTPException(status_code=HTTP_NOT_FOUND, detail=f"No healthy RPC endpoints found for {network}")
        return Recommender.format_recommendation(recommendation)
