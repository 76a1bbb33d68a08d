"""Test suite for the in-memory artwork cache"""

import threading

from stremio_local.metadata.cache import ResolutionCache


class TestResolutionCache:

    def test_miss(self):
        assert ResolutionCache().get("Inception 2010") is None

    def test_put_then_get(self):
        cache = ResolutionCache()
        cache.put("Inception 2010", "https://image.tmdb.org/t/p/original/a.jpg")
        assert cache.get("Inception 2010") == "https://image.tmdb.org/t/p/original/a.jpg"
        assert "Inception 2010" in cache
        assert cache.size() == 1

    def test_last_write_wins(self):
        cache = ResolutionCache()
        cache.put("Title", "first")
        cache.put("Title", "second")
        assert cache.get("Title") == "second"
        assert cache.size() == 1

    def test_empty_title_is_a_key(self):
        cache = ResolutionCache()
        cache.put("", "placeholder")
        assert cache.get("") == "placeholder"

    def test_instances_are_isolated(self):
        a, b = ResolutionCache(), ResolutionCache()
        a.put("Title", "url")
        assert b.get("Title") is None

    def test_concurrent_writers(self):
        cache = ResolutionCache()

        def writer(n):
            for i in range(200):
                cache.put(f"title-{n}-{i}", f"url-{n}-{i}")
                cache.get(f"title-{n}-{i}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert cache.size() == 8 * 200
