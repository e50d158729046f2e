"""Unit tests for network definitions and the built-in endpoint inventory."""

import pytest

from rpc_optimizer.chains.endpoints import (
    LLAMA_RPC_ENDPOINTS, PUBLIC_RPC_ENDPOINTS, get_endpoints_by_network, get_supported_networks
)
from rpc_optimizer.chains.networks import (
    ChainFamily, NETWORK_METADATA, Network, all_networks, network_for_chain_id
)
from rpc_optimizer.exceptions import UnknownNetworkError


class TestNetwork:
    """Test the Network enum."""

    def test_parse_member(self):
        assert Network.parse(Network.BASE) is Network.BASE

    @pytest.mark.parametrize("value", ["ethereum", "Ethereum", " ETHEREUM "])
    def test_parse_is_case_insensitive(self, value):
        assert Network.parse(value) is Network.ETHEREUM

    def test_parse_unknown_raises(self):
        with pytest.raises(UnknownNetworkError) as exc_info:
            Network.parse("dogecoin")
        assert exc_info.value.network == "dogecoin"
        assert "Unsupported network: dogecoin" in str(exc_info.value)

    def test_unknown_network_error_is_value_error(self):
        with pytest.raises(ValueError):
            Network.parse(42)

    def test_str_is_identifier(self):
        assert str(Network.SOLANA) == "solana"

    def test_every_network_has_metadata(self):
        assert set(NETWORK_METADATA) == set(Network)

    def test_families(self):
        assert Network.SOLANA.metadata.family is ChainFamily.SOLANA
        assert not Network.SOLANA.is_evm
        assert all(n.is_evm for n in Network if n is not Network.SOLANA)

    def test_evm_metadata(self):
        metadata = Network.POLYGON.metadata
        assert metadata.chain_id == 137
        assert metadata.symbol == "MATIC"
        assert metadata.decimals == 18

    def test_solana_metadata(self):
        metadata = Network.SOLANA.metadata
        assert metadata.chain_id is None
        assert metadata.symbol == "SOL"
        assert metadata.decimals == 9

    def test_network_for_chain_id(self):
        assert network_for_chain_id(8453) is Network.BASE
        assert network_for_chain_id(424242) is None

    def test_all_networks(self):
        assert all_networks() == list(Network)
        assert len(all_networks()) == 8


class TestEndpointInventory:
    """Test the built-in endpoint lists."""

    def test_every_network_has_static_endpoints(self):
        assert set(get_supported_networks()) == set(Network)

    def test_supported_networks_are_unique(self):
        networks = get_supported_networks()
        assert len(networks) == len(set(networks))

    def test_get_endpoints_by_network(self):
        endpoints = get_endpoints_by_network(Network.SOLANA)
        assert endpoints
        assert all(e.network is Network.SOLANA for e in endpoints)

    def test_get_endpoints_by_network_accepts_string(self):
        assert get_endpoints_by_network("bsc") == get_endpoints_by_network(Network.BSC)

    def test_static_urls_are_https_and_unique(self):
        urls = [e.url for e in PUBLIC_RPC_ENDPOINTS]
        assert len(urls) == len(set(urls))
        assert all(url.startswith("https://") for url in urls)

    def test_llama_endpoints_are_public(self):
        assert LLAMA_RPC_ENDPOINTS
        assert all(e.is_public for e in LLAMA_RPC_ENDPOINTS)
