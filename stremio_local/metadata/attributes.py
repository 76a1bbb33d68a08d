"""Infer content type and country of origin from a raw release filename."""
import re
import logging
from enum import Enum
from typing import Optional

from stremio_local.metadata.patterns import COUNTRY_TABLE

logger = logging.getLogger(__name__)

_SERIES_MARKER = re.compile(r'S\d{1,2}E\d{1,2}|Season[\s._-]*\d+', re.IGNORECASE)


class ContentType(str, Enum):
    """Kind of media; values double as TMDB search scopes."""

    MOVIE = 'movie'
    SERIES = 'tv'


def detect_type(raw: str) -> ContentType:
    """
    Detect whether a filename belongs to a movie or a TV series.

    Must be given the raw filename: normalization removes the season and
    episode markers this check relies on.

    Args:
        raw: Original filename

    Returns:
        ContentType.SERIES if a season/episode marker is present, else ContentType.MOVIE
    """
    if raw and _SERIES_MARKER.search(raw):
        return ContentType.SERIES
    return ContentType.MOVIE


def detect_region(raw: str) -> Optional[str]:
    """
    Find the two-letter code of the first country whose name occurs in the filename.

    Countries are checked in name order and matched as plain substrings of
    the upper-cased filename, so short names can hit inside unrelated words
    ("OMAN" in "ROMAN HOLIDAY").

    Args:
        raw: Original filename

    Returns:
        ISO 3166 alpha-2 code, or None if no country name occurs
    """
    if not raw:
        return None
    upper = raw.upper()
    for name, code in COUNTRY_TABLE:
        if name in upper:
            logger.debug(f"Detected region {code} ({name}) in '{raw}'")
            return code
    return None
