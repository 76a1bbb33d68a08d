"""Test suite for media directory scanning"""

import re

import pytest

from stremio_local.library import MediaItem, scan_media_dir
from stremio_local.library.scanner import detect_subtitle_language, generate_item_id

from conftest import INCEPTION_MKV, TRAITORS_MP4


class TestScan:

    def test_catalogs(self, library):
        assert library.catalog_ids() == ["Local", "Movies", "Shows"]
        assert len(library) == 3

    def test_only_video_files(self, library):
        paths = sorted(item.rel_path for item in library.items.values())
        assert paths == [
            "Loose.Movie.2001.MP4",
            f"Movies/{INCEPTION_MKV}",
            f"Shows/The Traitors/{TRAITORS_MP4}",
        ]

    def test_item_fields(self, library):
        item = library.get(generate_item_id(f"Movies/{INCEPTION_MKV}"))
        assert item.title == "Inception.2010.720p.BluRay.x264-YTS"
        assert item.display_title == "Inception 2010"
        assert item.year == 2010
        assert item.catalog == "Movies"

    def test_subtitles(self, library):
        item = library.get(generate_item_id(f"Movies/{INCEPTION_MKV}"))
        langs = {sub.rel_path: sub.lang for sub in item.subtitles}
        assert langs == {
            "Movies/Inception.2010.720p.BluRay.x264-YTS.bg.vtt": "Bulgarian",
            "Movies/Inception.2010.720p.BluRay.x264-YTS.en.srt": "English",
        }

    def test_search(self, library):
        assert [item.display_title for item in library.search("Shows", "traitors")] == ["The Traitors"]
        assert library.search("Shows", "inception") == []
        assert library.search("Nope", "x") == []

    def test_missing_dir(self, tmp_path):
        library = scan_media_dir(tmp_path / "absent")
        assert len(library) == 0
        assert library.catalog_ids() == []


class TestHelpers:

    def test_item_id_is_stable(self):
        first = generate_item_id("Movies/a.mkv")
        assert first == generate_item_id("Movies/a.mkv")
        assert first != generate_item_id("Movies/b.mkv")
        assert re.fullmatch(r"local\d{7}", first)

    @pytest.mark.parametrize("name,lang", [
        ("Movie.en.srt", "English"),
        ("Movie.BG.vtt", "Bulgarian"),
        ("Movie.srt", "Unknown"),
        ("Movie.xx.srt", "Unknown"),
    ])
    def test_subtitle_language(self, name, lang):
        assert detect_subtitle_language(name) == lang

    def test_display_title_falls_back_to_raw(self):
        item = MediaItem(id="local0000001", title="1080p.x264", rel_path="1080p.x264.mkv", catalog="Local")
        assert item.display_title == "1080p.x264"
        assert item.year is None
