"""Wallet-facing network configuration for a chosen endpoint."""
from typing import Any, Dict, Optional
from urllib.parse import quote

from rpc_optimizer.benchmark.models import Endpoint


def generate_network_config(endpoint: Endpoint) -> Dict[str, Any]:
    """Network config suitable for manual import into a wallet (EIP-3085 style for EVM networks)."""
    network = endpoint.network
    if not network.is_evm:
        return {
            "name": "Solana Mainnet (Optimized)",
            "rpcUrl": endpoint.url,
            "network": "mainnet-beta",
        }

    metadata = network.metadata
    return {
        "chainId": metadata.chain_id,
        "chainIdHex": hex(metadata.chain_id),
        "chainName": f"{metadata.name} (Optimized RPC)",
        "rpcUrl": endpoint.url,
        "nativeCurrency": {
            "name": metadata.symbol,
            "symbol": metadata.symbol,
            "decimals": metadata.decimals,
        },
        "blockExplorerUrl": metadata.explorer,
        "provider": endpoint.provider,
    }


def generate_trust_wallet_link(endpoint: Endpoint) -> Optional[str]:
    if not endpoint.network.is_evm:
        return None
    chain_id = endpoint.network.metadata.chain_id
    return f"trust://add_network?chain_id={chain_id}&rpc_url={quote(endpoint.url, safe='')}"


def generate_rainbow_link(endpoint: Endpoint) -> Optional[str]:
    if not endpoint.network.is_evm:
        return None
    chain_id = endpoint.network.metadata.chain_id
    return f"rainbow://network?chainId={chain_id}&rpcUrl={quote(endpoint.url, safe='')}"
