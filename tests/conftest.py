"""Shared fixtures: a recording stand-in for the TMDB HTTP session and a sample media dir."""
from unittest.mock import MagicMock

import pytest

from stremio_local.library import scan_media_dir
from stremio_local.metadata import ArtworkResolver, ResolutionCache, TMDBClient

INCEPTION_MKV = "Inception.2010.720p.BluRay.x264-YTS.mkv"
TRAITORS_MP4 = "The.Traitors.India.S01E01.HINDI.1080p.H264-TheArmory.mp4"


class FakeSession:
    """Answers TMDB searches per scope ('movie', 'tv', 'multi') and records every call."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        scope = url.rsplit('/', 1)[-1]
        self.calls.append({'url': url, 'scope': scope, 'query': params['query'], 'params': params, 'timeout': timeout})
        outcome = self.responses.get(scope, {'results': []})
        if isinstance(outcome, Exception):
            raise outcome
        response = MagicMock()
        response.json.return_value = outcome
        return response


def backdrop(path):
    return {'results': [{'title': 'Match', 'backdrop_path': path, 'poster_path': '/poster.jpg'}]}


@pytest.fixture
def make_resolver():
    """Build a resolver over a FakeSession; returns (resolver, session)."""
    def _make(responses=None, api_key='test-key'):
        session = FakeSession(responses)
        client = TMDBClient(api_key=api_key, session=session)
        return ArtworkResolver(api_key=api_key, cache=ResolutionCache(), client=client), session
    return _make


@pytest.fixture
def media_dir(tmp_path):
    """Small media tree with two catalogs, loose files and subtitles."""
    root = tmp_path / "media"
    movies = root / "Movies"
    shows = root / "Shows" / "The Traitors"
    movies.mkdir(parents=True)
    shows.mkdir(parents=True)

    (movies / INCEPTION_MKV).write_bytes(b"video")
    (movies / "Inception.2010.720p.BluRay.x264-YTS.en.srt").write_text("1\n00:00:01,000 --> 00:00:02,000\nHi\n")
    (movies / "Inception.2010.720p.BluRay.x264-YTS.bg.vtt").write_text("WEBVTT\n")
    (movies / "notes.txt").write_text("not media")
    (shows / TRAITORS_MP4).write_bytes(b"video")
    (root / "Loose.Movie.2001.MP4").write_bytes(b"video")
    return root


@pytest.fixture
def library(media_dir):
    return scan_media_dir(media_dir)
