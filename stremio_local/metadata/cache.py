"""Simple in-memory cache for resolved artwork to reduce API calls."""
import logging
import threading
from typing import Optional, Dict

logger = logging.getLogger(__name__)


class ResolutionCache:
    """
    In-memory map from canonical title to artwork URL.

    Lives for the whole process: no expiry, no size bound, nothing written to
    disk. Each read and write takes the lock on its own, so two first-time
    resolutions of the same title may both reach TMDB and the last write wins.
    """

    def __init__(self):
        """Initialize the cache."""
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, title: str) -> Optional[str]:
        """
        Get artwork URL from cache.

        Args:
            title: Canonical title, exactly as produced by normalize_title

        Returns:
            Cached URL or None if not found
        """
        with self._lock:
            return self._cache.get(title)

    def put(self, title: str, url: str) -> None:
        """
        Store artwork URL in cache.

        Args:
            title: Canonical title, exactly as produced by normalize_title
            url: Resolved image URL or placeholder URL
        """
        with self._lock:
            self._cache[title] = url
        logger.debug(f"Cached artwork for: '{title}' -> {url}")

    def size(self) -> int:
        """Get the number of cached items."""
        with self._lock:
            return len(self._cache)

    def __contains__(self, title: str) -> bool:
        with self._lock:
            return title in self._cache
