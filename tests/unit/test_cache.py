"""Unit tests for the TTL cache."""

from rpc_optimizer.shared.cache import TtlCache


class TestTtlCache:
    """Test TTL-on-read semantics."""

    def test_miss_on_empty(self, fake_clock):
        cache = TtlCache(default_ttl=300, clock=fake_clock)
        assert cache.get("ethereum") is None
        assert cache.get_stats()["misses"] == 1

    def test_hit_within_ttl(self, fake_clock):
        cache = TtlCache(default_ttl=300, clock=fake_clock)
        cache.put("ethereum", [1, 2])
        fake_clock.advance(299.9)

        assert cache.get("ethereum") == [1, 2]
        assert cache.get_stats()["hits"] == 1

    def test_expired_at_exact_ttl(self, fake_clock):
        cache = TtlCache(default_ttl=300, clock=fake_clock)
        cache.put("ethereum", [1])
        fake_clock.advance(300)

        assert cache.get("ethereum") is None
        stats = cache.get_stats()
        assert stats["expirations"] == 1
        assert stats["misses"] == 1
        assert len(cache) == 0

    def test_zero_ttl_never_hits(self, fake_clock):
        cache = TtlCache(default_ttl=0, clock=fake_clock)
        cache.put("ethereum", [1])
        assert cache.get("ethereum") is None

    def test_put_overwrites_and_resets_age(self, fake_clock):
        cache = TtlCache(default_ttl=300, clock=fake_clock)
        cache.put("ethereum", "old")
        fake_clock.advance(250)
        cache.put("ethereum", "new")
        fake_clock.advance(100)

        assert cache.get("ethereum") == "new"
        assert cache.age("ethereum") == 100

    def test_peek_ignores_age(self, fake_clock):
        cache = TtlCache(default_ttl=10, clock=fake_clock, keep_expired=True)
        cache.put("chains", "stale")
        fake_clock.advance(60)

        assert cache.get("chains") is None
        assert cache.peek("chains") == "stale"
        assert cache.peek("missing") is None

    def test_age_absent(self, fake_clock):
        assert TtlCache(clock=fake_clock).age("ethereum") is None

    def test_invalidate(self, fake_clock):
        cache = TtlCache(clock=fake_clock)
        cache.put("ethereum", 1)

        assert cache.invalidate("ethereum") is True
        assert cache.invalidate("ethereum") is False
        assert len(cache) == 0

    def test_clear_resets_stats(self, fake_clock):
        cache = TtlCache(clock=fake_clock)
        cache.put("a", 1)
        cache.get("a")
        cache.get("b")
        cache.clear()

        stats = cache.get_stats()
        assert stats == {"hits": 0, "misses": 0, "hit_rate": 0, "expirations": 0, "size": 0, "ttl": 300}

    def test_hit_rate(self, fake_clock):
        cache = TtlCache(clock=fake_clock)
        cache.put("a", 1)
        cache.get("a")
        cache.get("b")
        assert cache.get_stats()["hit_rate"] == 0.5
