from typing import Any, Dict, Optional

from fastapi import HTTPException, Query

from rpc_optimizer.const import HTTP_NOT_FOUND
from rpc_optimizer.slices.base_router import BaseRouter


class HealthRouter(BaseRouter):
    """Router for single-shot endpoint health checks."""

    tag = "health"

    def add_routes(self):
        self.router.get("/health/{network}", response_model=Dict[str, Any])(self.health_check)
        self.router.get("/fastest/{network}", response_model=Dict[str, Any])(self.fastest)

    async def health_check(self, network: str,
                           timeout_ms: Optional[int] = Query(None, gt=0)) -> Dict[str, Any]:
        """Probe every endpoint of a network once, fastest first."""
        network = self.parse_network(network)
        self.logger.debug(f"Checking endpoint health for {network}")
        results = await self.optimizer.check_network(network, timeout_ms)
        results = sorted(results, key=lambda r: r.latency_ms)
        healthy = sum(1 for r in results if r.is_healthy)

        status = "healthy" if healthy else "unhealthy"
        self.logger.info(f"Health check result for {network}: {status} ({healthy}/{len(results)} endpoints)")

        return {
            "network": network.value,
            "status": status,
            "healthy": healthy,
            "total": len(results),
            "results": [r.to_dict() for r in results],
        }

    async def fastest(self, network: str,
                      timeout_ms: Optional[int] = Query(None, gt=0)) -> Dict[str, Any]:
        """Lowest-latency healthy endpoint from one quick probe pass."""
        network = self.parse_network(network)
        endpoint = await self.optimizer.find_fastest(network, timeout_ms)
        if endpoint is None:
            raise HTTPException(status_code=HTTP_NOT_FOUND, detail=f"No healthy RPC endpoints found for {network}")
        return {"network": network.value, "endpoint": endpoint.to_dict()}
