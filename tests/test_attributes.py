"""Test suite for content type and region detection"""

import pytest

from stremio_local.metadata.attributes import ContentType, detect_region, detect_type
from stremio_local.metadata.patterns import COUNTRY_TABLE


class TestDetectType:

    @pytest.mark.parametrize("raw", [
        "The.Traitors.India.S01E01.HINDI.1080p.H264-TheArmory.En",
        "Breaking.Bad.s05e14.720p.HDTV.x264",
        "Show Season 2 Complete",
        "Show.Season.3.1080p",
        "Show_Season2",
    ])
    def test_series(self, raw):
        assert detect_type(raw) is ContentType.SERIES

    @pytest.mark.parametrize("raw", [
        "Inception.2010.720p.BluRay.x264-YTS",
        "Parasite (2019) 1080p WEB-DL H264 AAC-RARBG",
        "",
    ])
    def test_movie(self, raw):
        assert detect_type(raw) is ContentType.MOVIE

    def test_values_are_tmdb_scopes(self):
        assert ContentType.MOVIE.value == 'movie'
        assert ContentType.SERIES.value == 'tv'


class TestDetectRegion:

    def test_country_in_name(self):
        assert detect_region("The.Traitors.India.S01E01.HINDI.1080p.H264-TheArmory.En") == "IN"

    def test_case_insensitive(self):
        assert detect_region("money heist spain s01e01") == "ES"

    def test_no_country(self):
        assert detect_region("Inception.2010.720p.BluRay.x264-YTS") is None

    def test_empty(self):
        assert detect_region("") is None

    def test_substring_false_positive_is_kept(self):
        # plain substring match: OMAN inside ROMAN
        assert detect_region("Roman.Holiday.1953.1080p") == "OM"

    def test_table_is_sorted_by_name(self):
        names = [name for name, _ in COUNTRY_TABLE]
        assert names == sorted(names)
        assert ("INDIA", "IN") in COUNTRY_TABLE
