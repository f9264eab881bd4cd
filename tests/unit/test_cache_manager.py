"""
Unit tests for CacheManager
"""

import threading
import time

import pytest

from linguaflix.core.cache_manager import CacheManager, CacheEntry
from tests.helpers import FakeClock


class TestCacheManager:
    """Test CacheManager functionality"""

    def setup_method(self):
        """Setup test environment"""
        self.clock = FakeClock()
        self.cache_manager = CacheManager(
            default_ttl=3600,
            cleanup_interval=120,
            key_prefix="subtitle:",
            clock=self.clock,
            start_cleanup=False
        )

    def teardown_method(self):
        """Cleanup test environment"""
        self.cache_manager.close()

    def test_cache_manager_initialization(self):
        assert self.cache_manager.default_ttl == 3600
        assert self.cache_manager.cleanup_interval == 120
        assert len(self.cache_manager) == 0

    def test_cache_entry_expiration(self):
        entry = CacheEntry(key="k", value=["a"], created_at=0.0, last_accessed=0.0, ttl_seconds=3600)

        assert not entry.is_expired(3599.0)
        assert entry.is_expired(3600.0)
        assert not CacheEntry(key="k", value=1, created_at=0.0, last_accessed=0.0).is_expired(1e12)

    def test_basic_set_get(self):
        self.cache_manager.set("test_key", ["One.", "Two."])

        assert self.cache_manager.get("test_key") == ["One.", "Two."]

    def test_cache_miss(self):
        assert self.cache_manager.get("nonexistent_key") is None

    def test_empty_list_is_a_hit(self):
        self.cache_manager.set("empty", [])

        assert self.cache_manager.get("empty") == []

    def test_expired_entry_reads_as_miss_before_sweep(self):
        self.cache_manager.set("ttl_key", ["value"], ttl=10)

        self.clock.advance(9)
        assert self.cache_manager.get("ttl_key") == ["value"]

        self.clock.advance(1)
        assert self.cache_manager.get("ttl_key") is None
        assert len(self.cache_manager) == 0

    def test_set_replaces_entry_and_restarts_ttl(self):
        self.cache_manager.set("key", ["old"])
        self.clock.advance(3000)
        self.cache_manager.set("key", ["new"])
        self.clock.advance(3000)

        assert self.cache_manager.get("key") == ["new"]
        assert len(self.cache_manager) == 1

    def test_cleanup_expired_evicts_only_expired(self):
        self.cache_manager.set("short", ["a"], ttl=5)
        self.cache_manager.set("long", ["b"])
        self.clock.advance(6)

        assert self.cache_manager.cleanup_expired() == 1
        assert len(self.cache_manager) == 1
        assert self.cache_manager.get("long") == ["b"]

    def test_cache_deletion(self):
        self.cache_manager.set("delete_key", ["value"])

        assert self.cache_manager.delete("delete_key")
        assert self.cache_manager.get("delete_key") is None
        assert not self.cache_manager.delete("delete_key")

    def test_cache_clear(self):
        self.cache_manager.set("key1", ["value1"])
        self.cache_manager.set("key2", ["value2"])

        self.cache_manager.clear()

        assert self.cache_manager.get("key1") is None
        assert self.cache_manager.get("key2") is None

    def test_cache_statistics(self):
        stats = self.cache_manager.get_stats()
        assert stats['hits'] == 0
        assert stats['misses'] == 0
        assert stats['hit_rate'] == 0

        self.cache_manager.set("key", ["value"])
        self.cache_manager.get("key")
        self.cache_manager.get("missing")

        stats = self.cache_manager.get_stats()
        assert stats['hits'] == 1
        assert stats['misses'] == 1
        assert stats['hit_rate'] == 50.0
        assert stats['entries'] == 1

    def test_subtitle_key_is_prefix_plus_path(self):
        assert self.cache_manager.get_subtitle_key("subtitles/9-1-1.srt") == "subtitle:subtitles/9-1-1.srt"

    def test_concurrent_writes_leave_one_entry(self):
        def writer(value):
            for _ in range(100):
                self.cache_manager.set("shared", [value])

        threads = [threading.Thread(target=writer, args=(str(i),)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(self.cache_manager) == 1
        assert self.cache_manager.get("shared")[0] in {"0", "1", "2", "3"}


def test_background_sweep_evicts_expired_entries():
    cache_manager = CacheManager(default_ttl=0, cleanup_interval=0.05, key_prefix="subtitle:")
    try:
        cache_manager.set("key", ["value"])

        deadline = time.monotonic() + 2.0
        while len(cache_manager) and time.monotonic() < deadline:
            time.sleep(0.02)

        assert len(cache_manager) == 0
        assert cache_manager.get_stats()['evictions'] == 1
    finally:
        cache_manager.close()


def test_defaults_come_from_settings():
    cache_manager = CacheManager(start_cleanup=False)

    assert cache_manager.default_ttl == 86400
    assert cache_manager.cleanup_interval == 120
    assert cache_manager.get_subtitle_key("a.srt") == "subtitle:a.srt"
