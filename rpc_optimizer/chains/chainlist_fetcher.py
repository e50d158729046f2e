"""Fetches public RPC URLs from ChainList."""
import asyncio
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import httpx

from rpc_optimizer.benchmark.models import Endpoint
from rpc_optimizer.const import (
    ACCEPT_HEADER, CHAINLIST_CACHE_TTL, CHAINLIST_REQUEST_TIMEOUT_MS, CHAINLIST_URL, CONTENT_TYPE_JSON,
    REJECTED_URL_MARKERS, UNKNOWN_PROVIDER
)
from rpc_optimizer.exceptions import EndpointSourceError
from rpc_optimizer.shared.cache import TtlCache
from rpc_optimizer.shared.httpx_util import HTTPX_Util
from rpc_optimizer.shared.logging import LoggingManager

from .networks import Network, network_for_chain_id


logger = LoggingManager.get_logger(__name__)

_CHAINS_KEY = "chains"


def filter_valid_rpcs(rpcs: List[Union[str, Dict[str, Any]]]) -> List[str]:
    """Keep plain https URLs that need no API key or template substitution."""
    urls = []
    for rpc in rpcs:
        if isinstance(rpc, dict):
            url = rpc.get("url")
        else:
            url = rpc
        if not isinstance(url, str) or not url.startswith("https://"):
            continue
        if any(marker in url for marker in REJECTED_URL_MARKERS):
            continue
        urls.append(url)
    return urls


def extract_provider(url: str) -> str:
    """Provider label from the second-level domain, e.g. https://rpc.ankr.com/eth -> Ankr."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return UNKNOWN_PROVIDER
    if not hostname:
        return UNKNOWN_PROVIDER
    parts = hostname.split(".")
    if len(parts) >= 2:
        label = parts[-2]
        return label[:1].upper() + label[1:]
    return hostname


class ChainListFetcher:
    """Downloads the ChainList chain registry and turns it into endpoints.

    The registry is cached for ``cache_ttl`` seconds. When a refresh fails and an
    older copy is still held, the older copy is served instead.
    """

    def __init__(self, url: str = CHAINLIST_URL, cache_ttl: float = CHAINLIST_CACHE_TTL,
                 timeout_ms: float = CHAINLIST_REQUEST_TIMEOUT_MS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout_ms = timeout_ms
        self._transport = transport
        self._cache: TtlCache[List[Dict[str, Any]]] = TtlCache(default_ttl=cache_ttl, keep_expired=True)

    async def fetch_chain_list(self) -> List[Dict[str, Any]]:
        """
        Fetch the raw chain registry.

        Returns:
            List of chain records as published by ChainList.

        Raises:
            EndpointSourceError: If the download fails and nothing is cached.
        """
        cached = self._cache.get(_CHAINS_KEY)
        if cached is not None:
            return cached

        try:
            async with HTTPX_Util.create_async_client(self.timeout_ms, self._transport) as client:
                response = await client.get(self.url, headers={ACCEPT_HEADER: CONTENT_TYPE_JSON})
                response.raise_for_status()
                chains = response.json()
        except (httpx.HTTPError, ValueError) as e:
            stale = self._cache.peek(_CHAINS_KEY)
            if stale is not None:
                logger.warning(f"ChainList fetch failed, serving stale copy: {HTTPX_Util.describe_error(e)}")
                return stale
            logger.error(f"ChainList fetch failed: {HTTPX_Util.describe_error(e)}")
            raise EndpointSourceError(f"Failed to fetch ChainList: {HTTPX_Util.describe_error(e)}") from e

        if not isinstance(chains, list):
            raise EndpointSourceError("Unexpected ChainList payload")

        logger.info(f"Fetched {len(chains)} chains from ChainList")
        self._cache.put(_CHAINS_KEY, chains)
        return chains

    async def fetch_by_chain_id(self, chain_id: int) -> List[Endpoint]:
        """Endpoints for a chain id; empty when the id is unknown or unsupported."""
        network = network_for_chain_id(chain_id)
        if network is None:
            return []

        chains = await self.fetch_chain_list()
        chain = next((c for c in chains if isinstance(c, dict) and c.get("chainId") == chain_id), None)
        if chain is None:
            return []

        endpoints = []
        for url in filter_valid_rpcs(chain.get("rpc") or []):
            provider = extract_provider(url)
            endpoints.append(Endpoint(url=url, name=provider, network=network, is_public=True, provider=provider))
        return endpoints

    async def fetch_by_network(self, network: Union[Network, str]) -> List[Endpoint]:
        """Endpoints for a network. Solana is not listed on ChainList, so it yields nothing."""
        network = Network.parse(network)
        chain_id = network.metadata.chain_id
        if chain_id is None:
            return []
        return await self.fetch_by_chain_id(chain_id)

    async def fetch_all(self) -> List[Endpoint]:
        """Endpoints for every supported EVM network."""
        evm_networks = [network for network in Network if network.is_evm]
        # Warm the cache once so the per-network lookups share one download
        await self.fetch_chain_list()
        results = await asyncio.gather(*(self.fetch_by_network(network) for network in evm_networks))
        return [endpoint for endpoints in results for endpoint in endpoints]

    def clear_cache(self) -> None:
        """Forget the cached registry so the next call downloads it again."""
        self._cache.clear()
