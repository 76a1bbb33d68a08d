"""Stremio addon serving a local media folder."""

__version__ = "1.0.0"
