"""Unit tests for wallet network configuration."""

from rpc_optimizer.wallet.integration import (
    generate_network_config, generate_rainbow_link, generate_trust_wallet_link
)
from tests.conftest import make_endpoint
from tests.test_const import TEST_SOLANA_URL


class TestWalletIntegration:
    """Test wallet config and deep links."""

    def test_evm_network_config(self):
        endpoint = make_endpoint(url="https://rpc.ankr.com/polygon", network="polygon", provider="Ankr")
        assert generate_network_config(endpoint) == {
            "chainId": 137,
            "chainIdHex": "0x89",
            "chainName": "Polygon (Optimized RPC)",
            "rpcUrl": "https://rpc.ankr.com/polygon",
            "nativeCurrency": {"name": "MATIC", "symbol": "MATIC", "decimals": 18},
            "blockExplorerUrl": "https://polygonscan.com",
            "provider": "Ankr",
        }

    def test_solana_network_config(self):
        endpoint = make_endpoint(url=TEST_SOLANA_URL, network="solana")
        assert generate_network_config(endpoint) == {
            "name": "Solana Mainnet (Optimized)",
            "rpcUrl": TEST_SOLANA_URL,
            "network": "mainnet-beta",
        }

    def test_trust_wallet_link(self):
        endpoint = make_endpoint(url="https://rpc.ankr.com/eth?x=1")
        assert generate_trust_wallet_link(endpoint) == (
            "trust://add_network?chain_id=1&rpc_url=https%3A%2F%2Frpc.ankr.com%2Feth%3Fx%3D1"
        )

    def test_rainbow_link(self):
        endpoint = make_endpoint(url="https://base.drpc.org", network="base")
        assert generate_rainbow_link(endpoint) == "rainbow://network?chainId=8453&rpcUrl=https%3A%2F%2Fbase.drpc.org"

    def test_no_links_for_solana(self):
        endpoint = make_endpoint(url=TEST_SOLANA_URL, network="solana")
        assert generate_trust_wallet_link(endpoint) is None
        assert generate_rainbow_link(endpoint) is None
