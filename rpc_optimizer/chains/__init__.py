"""Network definitions and endpoint sources."""
from .networks import ChainFamily, Network, NetworkMetadata, NETWORK_METADATA, all_networks, network_for_chain_id

__all__ = [
    'ChainFamily',
    'Network',
    'NetworkMetadata',
    'NETWORK_METADATA',
    'all_networks',
    'network_for_chain_id'
]
