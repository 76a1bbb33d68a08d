"""Local media library scanning."""

from stremio_local.library.models import MediaItem, Subtitle
from stremio_local.library.scanner import MediaLibrary, scan_media_dir

__all__ = ['MediaItem', 'Subtitle', 'MediaLibrary', 'scan_media_dir']
