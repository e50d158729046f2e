"""Unit tests for benchmark data models."""

import pytest

from rpc_optimizer.benchmark.models import BenchmarkOptions, Endpoint, Recommendation
from rpc_optimizer.chains.networks import Network
from rpc_optimizer.exceptions import UnknownNetworkError
from tests.conftest import make_endpoint, make_result
from tests.test_const import TEST_URL, TEST_URL_2


class TestEndpoint:
    """Test Endpoint behaviour."""

    def test_network_string_is_parsed(self):
        endpoint = Endpoint(url=TEST_URL, name="x", network="Polygon")
        assert endpoint.network is Network.POLYGON

    def test_unknown_network_rejected(self):
        with pytest.raises(UnknownNetworkError):
            Endpoint(url=TEST_URL, name="x", network="dogecoin")

    def test_defaults(self):
        endpoint = Endpoint(url=TEST_URL, name="x", network="base")
        assert endpoint.is_public is True
        assert endpoint.provider is None

    def test_identity_is_url(self):
        a = make_endpoint(url=TEST_URL, name="A", provider="P1")
        b = make_endpoint(url=TEST_URL, name="B", provider="P2")
        c = make_endpoint(url=TEST_URL_2)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_from_dict_round_trip(self):
        endpoint = make_endpoint()
        assert Endpoint.from_dict(endpoint.to_dict()).to_dict() == endpoint.to_dict()

    def test_from_dict_name_falls_back_to_url(self):
        endpoint = Endpoint.from_dict({"url": TEST_URL, "network": "ethereum"})
        assert endpoint.name == TEST_URL

    def test_to_dict_uses_network_identifier(self):
        assert make_endpoint().to_dict()["network"] == "ethereum"


class TestBenchmarkOptions:
    """Test BenchmarkOptions validation."""

    def test_defaults(self):
        options = BenchmarkOptions()
        assert options.samples == 5
        assert options.timeout_ms == 5000
        assert options.parallel is True

    def test_zero_samples_allowed(self):
        assert BenchmarkOptions(samples=0).samples == 0

    def test_negative_samples_rejected(self):
        with pytest.raises(ValueError):
            BenchmarkOptions(samples=-1)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            BenchmarkOptions(timeout_ms=0)


class TestResultModels:
    """Test result serialisation."""

    def test_benchmark_result_network(self):
        result = make_result(make_endpoint(network="arbitrum"))
        assert result.network is Network.ARBITRUM

    def test_benchmark_result_to_dict(self):
        data = make_result(score=88, block_delay=1).to_dict()
        assert data["score"] == 88
        assert data["block_delay"] == 1
        assert data["endpoint"]["url"] == TEST_URL

    def test_recommendation_to_dict(self):
        best = make_result(score=90)
        alt = make_result(make_endpoint(url=TEST_URL_2), score=80)
        recommendation = Recommendation(
            recommended=best, alternatives=[alt], network=Network.ETHEREUM, reason="r", timestamp=0.0
        )
        data = recommendation.to_dict()
        assert data["network"] == "ethereum"
        assert data["recommended"]["score"] == 90
        assert [a["endpoint"]["url"] for a in data["alternatives"]] == [TEST_URL_2]
