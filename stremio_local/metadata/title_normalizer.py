"""Turn noisy release filenames into clean, search-ready titles."""
import re
import logging
from typing import Callable, List, Tuple

from stremio_local.metadata.patterns import (
    CODEC_SOURCE_TAGS,
    COUNTRY_ALIASES,
    COUNTRY_NAMES,
    LANGUAGES,
    MEDIA_EXTENSIONS,
    RELEASE_MARKER_GROUPS,
    RESOLUTION_TAGS,
)

logger = logging.getLogger(__name__)


def _token_pattern(alternatives: List[str]) -> re.Pattern:
    """Compile alternatives so they only match as whole tokens, case-insensitive."""
    return re.compile(r'(?<!\w)(?:' + '|'.join(alternatives) + r')(?!\w)', re.IGNORECASE)


_EXTENSION = re.compile(r'\.(?:' + '|'.join(MEDIA_EXTENSIONS) + r')$', re.IGNORECASE)
_RELEASE_GROUP = re.compile(r'-[A-Za-z0-9]+(?:\.[A-Za-z]{2})?$')
_BRACKETED = re.compile(r'\[[^\]]*\]')
_SEPARATORS = re.compile(r'[._]')
_EPISODE_MARKERS = _token_pattern([
    r'S\d{1,2}E\d{1,3}(?:-?E\d{1,3})*',
    r'E\d{1,3}',
    r'Season\s*\d+',
])
_RESOLUTION = _token_pattern(RESOLUTION_TAGS)
_CODEC_SOURCE = _token_pattern(CODEC_SOURCE_TAGS)
_LANGUAGE = _token_pattern(LANGUAGES)
_COUNTRY = _token_pattern(COUNTRY_NAMES + COUNTRY_ALIASES)
_RELEASE_MARKERS = [_token_pattern(group) for group in RELEASE_MARKER_GROUPS]
_EMPTY_BRACKETS = re.compile(r'\([\s\-:+,;]*\)|\{[\s\-:+,;]*\}')
_LONE_PUNCTUATION = re.compile(r'(?<!\S)[-:+,;]+(?!\S)')
_EDGE_PUNCTUATION = re.compile(r'^[\s\-:+,;]+|[\s\-:+,;]+$')
_WHITESPACE = re.compile(r'\s+')

# A technical tag or a year right before the final hyphen marks a release
# group ("x264-YTS"); anything else is a hyphenated title ("Spider-Man").
_TAG_BEFORE_GROUP = re.compile(
    r'(?<!\w)(?:' + '|'.join(
        RESOLUTION_TAGS + CODEC_SOURCE_TAGS + LANGUAGES
        + [tag for group in RELEASE_MARKER_GROUPS for tag in group]
        + [r'(?:19|20)\d{2}']
    ) + r')$',
    re.IGNORECASE
)


def strip_extension(title: str) -> str:
    """Remove a trailing media file extension."""
    return _EXTENSION.sub('', title)


def strip_release_group(title: str) -> str:
    """
    Remove a trailing ``-GROUP`` suffix, optionally followed by a subtitle language tag.

    ``Inception.2010.720p.BluRay.x264-YTS`` loses ``-YTS`` and
    ``Show.S01E01.H264-TheArmory.En`` loses ``-TheArmory.En``.
    """
    match = _RELEASE_GROUP.search(title)
    if not match:
        return title
    prefix = title[:match.start()]
    if _TAG_BEFORE_GROUP.search(_SEPARATORS.sub(' ', prefix)):
        return prefix
    return title


def strip_bracketed(title: str) -> str:
    """Remove square-bracketed annotations such as ``[1080p]`` or ``[YTS.MX]``."""
    return _BRACKETED.sub(' ', title)


def replace_separators(title: str) -> str:
    """Turn dot and underscore word separators into spaces."""
    return _SEPARATORS.sub(' ', title)


def remove_episode_markers(title: str) -> str:
    return _EPISODE_MARKERS.sub('', title)


def remove_resolution_tags(title: str) -> str:
    return _RESOLUTION.sub('', title)


def remove_codec_tags(title: str) -> str:
    return _CODEC_SOURCE.sub('', title)


def remove_languages(title: str) -> str:
    return _LANGUAGE.sub('', title)


def remove_countries(title: str) -> str:
    return _COUNTRY.sub('', title)


def remove_release_markers(title: str) -> str:
    """Remove dub/sub, audio, cut, repack, streaming service and encoder markers."""
    for pattern in _RELEASE_MARKERS:
        title = pattern.sub('', title)
    return title


def tidy_punctuation(title: str) -> str:
    """Drop brackets and separators that the removals left with nothing around them."""
    previous = None
    # "( - )" only becomes "( )" once the dash is gone
    while title != previous:
        previous = title
        title = _LONE_PUNCTUATION.sub(' ', title)
        title = _EMPTY_BRACKETS.sub(' ', title)
    return _EDGE_PUNCTUATION.sub('', title)


def collapse_whitespace(title: str) -> str:
    return _WHITESPACE.sub(' ', title).strip()


def strip_trailing_group(title: str) -> str:
    """
    Apply the release group rule again to the cleaned title.

    Tags between the title and the group hide a hyphenated suffix on the
    first check: ``Apocalypse.Now.1979-Redux.720p.BluRay.x264-GRP`` is
    ``Apocalypse Now 1979-Redux`` once they are gone, and ``-Redux`` now
    follows a year.
    """
    previous = None
    while title != previous:
        previous = title
        title = collapse_whitespace(tidy_punctuation(strip_release_group(title)))
    return title


# Broad markers go before narrow ones; "HD" must not be removed before "BluRay" or "DTS-HD".
NORMALIZATION_STEPS: Tuple[Callable[[str], str], ...] = (
    strip_extension,
    strip_release_group,
    strip_bracketed,
    replace_separators,
    remove_episode_markers,
    remove_resolution_tags,
    remove_codec_tags,
    remove_languages,
    remove_countries,
    remove_release_markers,
    tidy_punctuation,
    collapse_whitespace,
    strip_trailing_group,
)


def normalize_title(raw: str) -> str:
    """
    Clean a raw release filename into a canonical search title.

    Handles common release naming patterns:
    - Movies: "Inception.2010.720p.BluRay.x264-YTS" -> "Inception 2010"
    - TV Shows: "The.Traitors.India.S01E01.HINDI.1080p.H264-TheArmory.En.mkv" -> "The Traitors"

    Country names are removed as well; the region is carried separately by
    ``detect_region``. The result may be empty when the filename consists of
    technical tokens only.

    Args:
        raw: Original filename, with or without extension

    Returns:
        Canonical title
    """
    title = raw or ''
    for step in NORMALIZATION_STEPS:
        title = step(title)
    logger.debug(f"Normalized '{raw}' -> '{title}'")
    return title
