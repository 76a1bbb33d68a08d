"""Metadata module for turning release filenames into display titles and TMDB artwork."""

from stremio_local.metadata.title_normalizer import normalize_title
from stremio_local.metadata.attributes import ContentType, detect_type, detect_region
from stremio_local.metadata.cache import ResolutionCache
from stremio_local.metadata.tmdb_client import TMDBClient
from stremio_local.metadata.artwork import ArtworkResolver, placeholder_background, placeholder_poster

__all__ = [
    'normalize_title', 'ContentType', 'detect_type', 'detect_region', 'ResolutionCache',
    'TMDBClient', 'ArtworkResolver', 'placeholder_background', 'placeholder_poster',
]
