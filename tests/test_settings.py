"""Test suite for environment-driven settings"""

from stremio_local.config.settings import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("TMDB_API_KEY", "MEDIA_DIR", "ADDON_PORT", "TMDB_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.tmdb_api_key == ""
        assert settings.media_dir == "/media"
        assert settings.addon_port == 8081
        assert settings.tmdb_timeout == 10.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "abc123")
        monkeypatch.setenv("media_dir", "/srv/media")
        monkeypatch.setenv("ADDON_PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.tmdb_api_key == "abc123"
        assert settings.media_dir == "/srv/media"
        assert settings.addon_port == 9000
