"""Token tables used to clean release filenames and detect their attributes.

Every entry is a regex alternative (already escaped where needed). Tags that
are usually written with a dot (``H.264``, ``DD5.1``) also accept a space,
because separators are turned into spaces before most removals run.
"""
import re
from typing import List, Tuple

import pycountry

MEDIA_EXTENSIONS = ['mp4', 'mkv', 'avi', 'mov', 'webm', 'm4v']

RESOLUTION_TAGS = [
    r'480p', r'576p', r'720p', r'1080[pi]', r'1440p', r'2160p', r'4320p', r'4K', r'8K',
]

CODEC_SOURCE_TAGS = [
    r'x26[45]', r'H[ .]?26[45]', r'HEVC',
    r'WEB-?Rip', r'WEB-?DL', r'Blu-?Ray', r'BDRip', r'BRRip', r'HDRip', r'DVDRip', r'HDTV',
]

LANGUAGES = [
    "ENGLISH", "HINDI", "FRENCH", "SPANISH", "GERMAN", "TURKISH",
    "KOREAN", "JAPANESE", "CHINESE", "ITALIAN", "RUSSIAN", "PORTUGUESE",
    "ARABIC", "DUTCH", "SWEDISH", "NORWEGIAN", "DANISH", "FINNISH",
    "POLISH", "GREEK", "CZECH", "HUNGARIAN", "ROMANIAN", "THAI",
]

# Spellings of countries that release names use instead of the ISO name
COUNTRY_ALIASES = [r'UK', r'U[. ]S[. ]A', r'U[. ]S']

# Groups are removed in this order. Longer spellings come first inside a
# group so "DDP5.1" is not cut down to "DDP" plus a dangling "5.1". Bare HD
# leaves the HD of "DTS-HD" to the surround group.
RELEASE_MARKER_GROUPS = [
    [r'DUBBED', r'SUBBED', r'SUBS', r'DUB', r'MULTI'],
    [r'DDP?[ .]?5[ .]1', r'AAC(?:[ .]?[257][ .][01])?', r'MP3', r'FLAC', r'E-?AC-?3', r'TRUE-?HD', r'ATMOS'],
    [r'HDR(?:10\+?)?', r'SDR', r'IMAX', r'REMASTERED', r"DIRECTOR'?S CUT", r'EXTENDED', r'UNCUT'],
    [r'PROPER', r'REPACK', r'LIMITED', r'INTERNAL'],
    [r'READNFO', r'NFO'],
    [r'UNRATED', r'THEATRICAL'],
    [r'NEWSEASON', r'SEASON', r'COMPLETE'],
    [r'(?<!DTS-)HD'],
    [r'AMZN', r'NF', r'HULU', r'DSNP', r'DISNEY\+', r'PRIME', r'NETFLIX', r'HMAX', r'ATVP'],
    [r'DDP[ .]?[257][ .][01]', r'DD[ .]?[257][ .][01]', r'DTS-HD(?:[ .]?MA)?(?:[ .][257][ .][01])?', r'DTS:X', r'DTSMA', r'DTS(?:[ .]?[257][ .][01])?', r'DDP'],
    [r'AC3', r'EVO', r'AVC', r'VC-1', r'VVC', r'10-?bit'],
]


def _build_country_table() -> List[Tuple[str, str]]:
    """Upper-cased country names (ISO name and common name) with their alpha-2 code, sorted by name."""
    table = {}
    for country in pycountry.countries:
        for name in (country.name, getattr(country, 'common_name', None)):
            if name:
                table[name.upper()] = country.alpha_2
    return sorted(table.items())


COUNTRY_TABLE = _build_country_table()

COUNTRY_NAMES = [re.escape(name) for name, _ in sorted(COUNTRY_TABLE, key=lambda entry: -len(entry[0]))]
