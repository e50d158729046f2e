from typing import Any, Dict, List

from rpc_optimizer.slices.base_router import BaseRouter


class NetworksRouter(BaseRouter):
    """Router for listing supported networks."""

    prefix = "/networks"
    tag = "networks"

    def add_routes(self):
        self.router.get("", response_model=List[Dict[str, Any]])(self.list_networks)

    async def list_networks(self) -> List[Dict[str, Any]]:
        """List supported networks with their metadata and endpoint counts."""
        networks = []
        for network in self.optimizer.get_supported_networks():
            metadata = network.metadata
            networks.append({
                "id": network.value,
                "name": metadata.name,
                "symbol": metadata.symbol,
                "chain_id": metadata.chain_id,
                "family": metadata.family.value,
                "endpoints": len(self.optimizer.get_endpoints(network)),
            })
        self.logger.info(f"Listed {len(networks)} supported networks")
        return networks
