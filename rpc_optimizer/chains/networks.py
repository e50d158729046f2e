"""Supported networks and their metadata."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from rpc_optimizer.exceptions import UnknownNetworkError


class ChainFamily(str, Enum):
    """JSON-RPC dialect spoken by a network."""
    EVM = "evm"
    SOLANA = "solana"


class Network(str, Enum):
    """Closed set of networks the optimizer knows how to probe."""
    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    BSC = "bsc"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    AVALANCHE = "avalanche"
    BASE = "base"
    SOLANA = "solana"

    @classmethod
    def parse(cls, value: Union["Network", str]) -> "Network":
        """Resolve a network from an enum member or its identifier (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownNetworkError(str(value))

    @property
    def metadata(self) -> "NetworkMetadata":
        return NETWORK_METADATA[self]

    @property
    def is_evm(self) -> bool:
        return self.metadata.family is ChainFamily.EVM

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NetworkMetadata:
    """Display and wallet metadata for a network."""
    name: str
    symbol: str
    decimals: int
    explorer: str
    chain_id: Optional[int]
    family: ChainFamily = ChainFamily.EVM


NETWORK_METADATA: Dict[Network, NetworkMetadata] = {
    Network.ETHEREUM: NetworkMetadata("Ethereum", "ETH", 18, "https://etherscan.io", 1),
    Network.POLYGON: NetworkMetadata("Polygon", "MATIC", 18, "https://polygonscan.com", 137),
    Network.BSC: NetworkMetadata("BNB Smart Chain", "BNB", 18, "https://bscscan.com", 56),
    Network.ARBITRUM: NetworkMetadata("Arbitrum One", "ETH", 18, "https://arbiscan.io", 42161),
    Network.OPTIMISM: NetworkMetadata("Optimism", "ETH", 18, "https://optimistic.etherscan.io", 10),
    Network.AVALANCHE: NetworkMetadata("Avalanche C-Chain", "AVAX", 18, "https://snowtrace.io", 43114),
    Network.BASE: NetworkMetadata("Base", "ETH", 18, "https://basescan.org", 8453),
    Network.SOLANA: NetworkMetadata("Solana", "SOL", 9, "https://explorer.solana.com", None, ChainFamily.SOLANA),
}


def _validate_metadata() -> None:
    missing = [network.value for network in Network if network not in NETWORK_METADATA]
    if missing:
        raise RuntimeError(f"Missing metadata for networks: {', '.join(missing)}")
    for network, metadata in NETWORK_METADATA.items():
        if metadata.family is ChainFamily.EVM and metadata.chain_id is None:
            raise RuntimeError(f"EVM network {network.value} has no chain id")


_validate_metadata()


def all_networks() -> List[Network]:
    """All supported networks in declaration order."""
    return list(Network)


def network_for_chain_id(chain_id: int) -> Optional[Network]:
    """Map an EVM chain id back to a supported network."""
    for network, metadata in NETWORK_METADATA.items():
        if metadata.chain_id == chain_id:
            return network
    return None
