"""TMDB API client for looking up background and poster artwork."""
import logging
from typing import Optional, List

import requests
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

TMDB_API_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_URL = "https://image.tmdb.org/t/p/original"

SEARCH_SCOPES = ('movie', 'tv', 'multi')


class SearchResult(BaseModel):
    """One entry of a TMDB search response."""
    title: Optional[str] = Field(None, description="Movie title")
    name: Optional[str] = Field(None, description="TV show or person name")
    backdrop_path: Optional[str] = Field(None, description="Path of the backdrop image")
    poster_path: Optional[str] = Field(None, description="Path of the poster image")

    def image_path(self) -> Optional[str]:
        """Backdrop path if present, else poster path."""
        return self.backdrop_path or self.poster_path or None


class SearchResponse(BaseModel):
    """Body of /search/{movie,tv,multi}."""
    results: List[SearchResult] = Field(default_factory=list)


class TMDBClient:
    """Client for searching The Movie Database (TMDB) for artwork."""

    def __init__(self, api_key: Optional[str], session: Optional[requests.Session] = None, timeout: float = 10.0):
        """
        Initialize TMDB client.

        Args:
            api_key: TMDB API key (v3). Empty disables lookups.
            session: Optional requests session (shared connection pool, or a stub in tests)
            timeout: Timeout in seconds for each request
        """
        self.api_key = api_key or ''
        self.session = session or requests.Session()
        self.timeout = timeout
        self.enabled = bool(self.api_key)
        if not self.enabled:
            logger.warning("TMDB API key not configured. Artwork lookup will use placeholders only.")
        else:
            logger.info("TMDB client initialized")

    def search_image(self, query: str, scope: str) -> Optional[str]:
        """
        Search TMDB and return the full-size image URL of the first result.

        Transport errors, HTTP error statuses, undecodable bodies, empty result
        lists and a first result without any image all count as "no match".

        Args:
            query: Free-text search term
            scope: 'movie', 'tv' or 'multi'

        Returns:
            Image URL (backdrop preferred over poster) or None if not found
        """
        if not self.enabled:
            return None
        if scope not in SEARCH_SCOPES:
            raise ValueError(f"Unknown TMDB search scope: {scope}")

        try:
            response = self.session.get(
                f"{TMDB_API_URL}/search/{scope}",
                params={'api_key': self.api_key, 'query': query},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = SearchResponse.model_validate(response.json())
        except requests.RequestException as e:
            logger.warning(f"TMDB {scope} search failed for '{query}': {e}")
            return None
        except (ValueError, ValidationError) as e:
            logger.warning(f"Could not decode TMDB {scope} response for '{query}': {e}")
            return None

        if not data.results:
            logger.debug(f"No TMDB results for '{query}' ({scope})")
            return None

        image_path = data.results[0].image_path()
        if not image_path:
            logger.debug(f"No image found for '{query}' ({scope})")
            return None

        return f"{TMDB_IMAGE_URL}{image_path}"
