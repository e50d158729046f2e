"""Built-in endpoint inventory."""
from typing import Iterable, List, Tuple

from rpc_optimizer.benchmark.models import Endpoint
from rpc_optimizer.chains.networks import Network

# (url, name, network, provider)
_PUBLIC_RPCS: List[Tuple[str, str, str, str]] = [
    ("https://eth.llamarpc.com", "LlamaRPC", "ethereum", "LlamaNodes"),
    ("https://rpc.ankr.com/eth", "Ankr", "ethereum", "Ankr"),
    ("https://ethereum.publicnode.com", "PublicNode", "ethereum", "PublicNode"),
    ("https://1rpc.io/eth", "1RPC", "ethereum", "Automata"),
    ("https://eth.drpc.org", "dRPC", "ethereum", "dRPC"),
    ("https://rpc.payload.de", "Payload", "ethereum", "Payload"),
    ("https://eth.merkle.io", "Merkle", "ethereum", "Merkle"),
    ("https://cloudflare-eth.com", "Cloudflare", "ethereum", "Cloudflare"),
    ("https://polygon.llamarpc.com", "LlamaRPC", "polygon", "LlamaNodes"),
    ("https://rpc.ankr.com/polygon", "Ankr", "polygon", "Ankr"),
    ("https://polygon-bor-rpc.publicnode.com", "PublicNode", "polygon", "PublicNode"),
    ("https://1rpc.io/matic", "1RPC", "polygon", "Automata"),
    ("https://polygon.drpc.org", "dRPC", "polygon", "dRPC"),
    ("https://polygon-rpc.com", "Polygon", "polygon", "Polygon"),
    ("https://bsc-dataseed1.binance.org", "Binance 1", "bsc", "Binance"),
    ("https://bsc-dataseed2.binance.org", "Binance 2", "bsc", "Binance"),
    ("https://rpc.ankr.com/bsc", "Ankr", "bsc", "Ankr"),
    ("https://bsc.publicnode.com", "PublicNode", "bsc", "PublicNode"),
    ("https://1rpc.io/bnb", "1RPC", "bsc", "Automata"),
    ("https://bsc.drpc.org", "dRPC", "bsc", "dRPC"),
    ("https://arb1.arbitrum.io/rpc", "Arbitrum", "arbitrum", "Offchain Labs"),
    ("https://rpc.ankr.com/arbitrum", "Ankr", "arbitrum", "Ankr"),
    ("https://arbitrum.publicnode.com", "PublicNode", "arbitrum", "PublicNode"),
    ("https://1rpc.io/arb", "1RPC", "arbitrum", "Automata"),
    ("https://arbitrum.drpc.org", "dRPC", "arbitrum", "dRPC"),
    ("https://arbitrum.llamarpc.com", "LlamaRPC", "arbitrum", "LlamaNodes"),
    ("https://mainnet.optimism.io", "Optimism", "optimism", "Optimism"),
    ("https://rpc.ankr.com/optimism", "Ankr", "optimism", "Ankr"),
    ("https://optimism.publicnode.com", "PublicNode", "optimism", "PublicNode"),
    ("https://1rpc.io/op", "1RPC", "optimism", "Automata"),
    ("https://optimism.drpc.org", "dRPC", "optimism", "dRPC"),
    ("https://optimism.llamarpc.com", "LlamaRPC", "optimism", "LlamaNodes"),
    ("https://api.avax.network/ext/bc/C/rpc", "Avalanche", "avalanche", "Ava Labs"),
    ("https://rpc.ankr.com/avalanche", "Ankr", "avalanche", "Ankr"),
    ("https://avalanche-c-chain-rpc.publicnode.com", "PublicNode", "avalanche", "PublicNode"),
    ("https://1rpc.io/avax/c", "1RPC", "avalanche", "Automata"),
    ("https://avax.meowrpc.com", "MeowRPC", "avalanche", "MeowRPC"),
    ("https://mainnet.base.org", "Base", "base", "Coinbase"),
    ("https://rpc.ankr.com/base", "Ankr", "base", "Ankr"),
    ("https://base.publicnode.com", "PublicNode", "base", "PublicNode"),
    ("https://1rpc.io/base", "1RPC", "base", "Automata"),
    ("https://base.drpc.org", "dRPC", "base", "dRPC"),
    ("https://base.llamarpc.com", "LlamaRPC", "base", "LlamaNodes"),
    ("https://api.mainnet-beta.solana.com", "Solana", "solana", "Solana Foundation"),
    ("https://rpc.ankr.com/solana", "Ankr", "solana", "Ankr"),
    ("https://solana.publicnode.com", "PublicNode", "solana", "PublicNode"),
]

# LlamaNodes (DefiLlama) curated free tier plus other privacy-focused public providers
_LLAMA_RPCS: List[Tuple[str, str, str, str]] = [
    ("https://eth.llamarpc.com", "LlamaRPC", "ethereum", "DefiLlama"),
    ("https://eth.drpc.org", "dRPC", "ethereum", "dRPC"),
    ("https://ethereum.publicnode.com", "PublicNode", "ethereum", "PublicNode"),
    ("https://rpc.ankr.com/eth", "Ankr", "ethereum", "Ankr"),
    ("https://1rpc.io/eth", "1RPC", "ethereum", "1RPC"),
    ("https://eth-mainnet.public.blastapi.io", "BlastAPI", "ethereum", "BlastAPI"),
    ("https://polygon.llamarpc.com", "LlamaRPC", "polygon", "DefiLlama"),
    ("https://polygon.drpc.org", "dRPC", "polygon", "dRPC"),
    ("https://polygon-bor-rpc.publicnode.com", "PublicNode", "polygon", "PublicNode"),
    ("https://rpc.ankr.com/polygon", "Ankr", "polygon", "Ankr"),
    ("https://1rpc.io/matic", "1RPC", "polygon", "1RPC"),
    ("https://polygon-mainnet.public.blastapi.io", "BlastAPI", "polygon", "BlastAPI"),
    ("https://binance.llamarpc.com", "LlamaRPC", "bsc", "DefiLlama"),
    ("https://bsc.drpc.org", "dRPC", "bsc", "dRPC"),
    ("https://bsc-rpc.publicnode.com", "PublicNode", "bsc", "PublicNode"),
    ("https://rpc.ankr.com/bsc", "Ankr", "bsc", "Ankr"),
    ("https://1rpc.io/bnb", "1RPC", "bsc", "1RPC"),
    ("https://bsc-mainnet.public.blastapi.io", "BlastAPI", "bsc", "BlastAPI"),
    ("https://arbitrum.llamarpc.com", "LlamaRPC", "arbitrum", "DefiLlama"),
    ("https://arbitrum.drpc.org", "dRPC", "arbitrum", "dRPC"),
    ("https://arbitrum-one-rpc.publicnode.com", "PublicNode", "arbitrum", "PublicNode"),
    ("https://rpc.ankr.com/arbitrum", "Ankr", "arbitrum", "Ankr"),
    ("https://1rpc.io/arb", "1RPC", "arbitrum", "1RPC"),
    ("https://arbitrum-one.public.blastapi.io", "BlastAPI", "arbitrum", "BlastAPI"),
    ("https://optimism.llamarpc.com", "LlamaRPC", "optimism", "DefiLlama"),
    ("https://optimism.drpc.org", "dRPC", "optimism", "dRPC"),
    ("https://optimism-rpc.publicnode.com", "PublicNode", "optimism", "PublicNode"),
    ("https://rpc.ankr.com/optimism", "Ankr", "optimism", "Ankr"),
    ("https://1rpc.io/op", "1RPC", "optimism", "1RPC"),
    ("https://optimism-mainnet.public.blastapi.io", "BlastAPI", "optimism", "BlastAPI"),
    ("https://avalanche.drpc.org", "dRPC", "avalanche", "dRPC"),
    ("https://avalanche-c-chain-rpc.publicnode.com", "PublicNode", "avalanche", "PublicNode"),
    ("https://rpc.ankr.com/avalanche", "Ankr", "avalanche", "Ankr"),
    ("https://1rpc.io/avax/c", "1RPC", "avalanche", "1RPC"),
    ("https://ava-mainnet.public.blastapi.io/ext/bc/C/rpc", "BlastAPI", "avalanche", "BlastAPI"),
    ("https://base.llamarpc.com", "LlamaRPC", "base", "DefiLlama"),
    ("https://base.drpc.org", "dRPC", "base", "dRPC"),
    ("https://base-rpc.publicnode.com", "PublicNode", "base", "PublicNode"),
    ("https://rpc.ankr.com/base", "Ankr", "base", "Ankr"),
    ("https://1rpc.io/base", "1RPC", "base", "1RPC"),
    ("https://base-mainnet.public.blastapi.io", "BlastAPI", "base", "BlastAPI"),
    ("https://solana.drpc.org", "dRPC", "solana", "dRPC"),
    ("https://solana-rpc.publicnode.com", "PublicNode", "solana", "PublicNode"),
]


def _build(rows: Iterable[Tuple[str, str, str, str]]) -> List[Endpoint]:
    return [Endpoint(url=url, name=name, network=network, is_public=True, provider=provider)
            for url, name, network, provider in rows]


PUBLIC_RPC_ENDPOINTS: List[Endpoint] = _build(_PUBLIC_RPCS)
LLAMA_RPC_ENDPOINTS: List[Endpoint] = _build(_LLAMA_RPCS)


def get_endpoints_by_network(network: Network) -> List[Endpoint]:
    """Static endpoints for one network."""
    network = Network.parse(network)
    return [e for e in PUBLIC_RPC_ENDPOINTS if e.network is network]


def get_supported_networks() -> List[Network]:
    """Networks that have at least one built-in endpoint, in inventory order."""
    return list(dict.fromkeys(e.network for e in PUBLIC_RPC_ENDPOINTS))
