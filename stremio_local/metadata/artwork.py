"""Resolve a release filename to background artwork, with TMDB fallbacks and placeholders."""
import logging
from typing import Optional
from urllib.parse import quote_plus

from stremio_local.metadata.attributes import detect_region, detect_type
from stremio_local.metadata.cache import ResolutionCache
from stremio_local.metadata.title_normalizer import normalize_title
from stremio_local.metadata.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "https://dummyimage.com/{width}x{height}/{background}/{foreground}&text={text}"


def placeholder_background(title: str) -> str:
    """Generated 1280x720 image with the title in white on dark gray."""
    return PLACEHOLDER_URL.format(width=1280, height=720, background='222222', foreground='ffffff',
                                  text=quote_plus(title or ''))


def placeholder_poster(title: str) -> str:
    """Generated 200x300 poster showing the title."""
    return PLACEHOLDER_URL.format(width=200, height=300, background='444444', foreground='ffffff',
                                  text=quote_plus(title or ''))


class ArtworkResolver:
    """Turns raw filenames into background image URLs."""

    def __init__(self, api_key: Optional[str], cache: Optional[ResolutionCache] = None,
                 client: Optional[TMDBClient] = None):
        """
        Initialize the resolver.

        Args:
            api_key: TMDB API key (v3), used when no client is given
            cache: Cache shared by every resolution; a fresh one is created if None
            client: Optional preconfigured TMDB client
        """
        self.cache = cache if cache is not None else ResolutionCache()
        self.client = client or TMDBClient(api_key=api_key)

    def resolve(self, raw: str) -> str:
        """
        Get a background image URL for a raw filename.

        Order of attempts:
        1. cached result for the canonical title
        2. type-scoped search ('movie' or 'tv'), region appended as "(IN)" when detected
        3. 'multi' search with the plain canonical title
        4. generated placeholder showing the title

        Whatever is returned is cached under the canonical title, placeholders
        included, so an unknown title only hits TMDB once.

        Args:
            raw: Original filename

        Returns:
            Image URL; never empty
        """
        title = normalize_title(raw)

        cached = self.cache.get(title)
        if cached:
            logger.debug(f"Artwork cache hit for '{title}'")
            return cached

        media_type = detect_type(raw)
        region = detect_region(raw)
        search_term = f"{title} ({region})" if region else title

        image = self.client.search_image(search_term, media_type.value)
        if not image:
            logger.debug(f"No {media_type.value} match for '{search_term}', trying multi search")
            image = self.client.search_image(title, 'multi')

        if image:
            logger.info(f"Resolved artwork for '{title}': {image}")
        else:
            logger.info(f"No artwork found for '{title}', using placeholder")
            image = placeholder_background(title)

        self.cache.put(title, image)
        return image
