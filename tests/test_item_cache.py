"""Tests for the item pool cache."""

from conftest import make_item
from vocab_trainer.item_cache import ItemPoolCache


class FakeClock:
    def __init__(self):
        self.value = 0.0

    def __call__(self):
        return self.value


class CountingLoader:
    def __init__(self):
        self.calls = 0

    def __call__(self, user_id):
        self.calls += 1
        return [make_item(f"{user_id}-{self.calls}")]


def test_read_through_and_hit():
    loader = CountingLoader()
    cache = ItemPoolCache(loader, ttl_seconds=60, clock=FakeClock())
    assert cache.get("alice")[0].id == "alice-1"
    assert cache.get("alice")[0].id == "alice-1"
    assert loader.calls == 1


def test_expiry_reloads():
    loader, clock = CountingLoader(), FakeClock()
    cache = ItemPoolCache(loader, ttl_seconds=60, clock=clock)
    cache.get("alice")
    clock.value = 61
    assert cache.get("alice")[0].id == "alice-2"


def test_invalidate_single_user():
    loader = CountingLoader()
    cache = ItemPoolCache(loader, clock=FakeClock())
    cache.get("alice")
    cache.get("bob")
    cache.invalidate("alice")
    assert cache.peek("alice") is None
    assert cache.peek("bob") is not None
    cache.invalidate_all()
    assert cache.peek("bob") is None


def test_returned_pool_is_a_copy():
    cache = ItemPoolCache(CountingLoader(), clock=FakeClock())
    pool = cache.get("alice")
    pool[0].priority_score = 1
    pool.clear()
    cached = cache.get("alice")
    assert len(cached) == 1
    assert cached[0].priority_score == 80


def test_invalidate_during_load_is_not_overwritten():
    def loader(user_id):
        pool = [make_item("before-write")]
        cache.invalidate(user_id)  # a write lands while the pool is being read
        return pool

    cache = ItemPoolCache(loader, clock=FakeClock())
    assert [item.id for item in cache.get("alice")] == ["before-write"]
    assert cache.peek("alice") is None


def test_invalidate_all_during_load_is_not_overwritten():
    def loader(user_id):
        cache.invalidate_all()
        return [make_item("before-write")]

    cache = ItemPoolCache(loader, clock=FakeClock())
    cache.get("alice")
    assert cache.peek("alice") is None


def test_load_after_invalidation_is_cached():
    loader = CountingLoader()
    cache = ItemPoolCache(loader, clock=FakeClock())
    cache.invalidate("alice")
    cache.get("alice")
    cache.get("alice")
    assert loader.calls == 1
