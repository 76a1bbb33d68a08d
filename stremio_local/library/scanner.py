"""Scan a media directory into catalogs of playable items."""
import logging
import os
from hashlib import md5
from pathlib import Path
from typing import Dict, List, Optional

from stremio_local.library.models import MediaItem, Subtitle

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = {'.mp4', '.mkv'}
SUBTITLE_EXTENSIONS = {'.srt', '.vtt'}

ID_PREFIX = "local"
ROOT_CATALOG = "Local"

SUBTITLE_LANGUAGES = {
    'en': 'English',
    'bg': 'Bulgarian',
    'de': 'German',
    'es': 'Spanish',
    'fr': 'French',
    'it': 'Italian',
    'pt': 'Portuguese',
    'ru': 'Russian',
}


def generate_item_id(rel_path: str) -> str:
    """
    Derive a stable id for a media file.

    Args:
        rel_path: POSIX path relative to the media dir

    Returns:
        "local" followed by seven digits taken from the md5 of the path
    """
    digest = md5(rel_path.encode('utf-8')).digest()
    number = int.from_bytes(digest[:4], 'big') % 9999999
    return f"{ID_PREFIX}{number:07d}"


def detect_subtitle_language(file_name: str) -> str:
    """Language name from the last dotted part of a subtitle name ("Movie.en.srt" -> "English")."""
    stem = Path(file_name).stem
    code = stem.rsplit('.', 1)[-1].lower()
    return SUBTITLE_LANGUAGES.get(code, 'Unknown')


class MediaLibrary:
    """Catalogs of media items found under one media dir."""

    def __init__(self, media_dir: Path, items: Optional[List[MediaItem]] = None):
        self.media_dir = media_dir
        self.items: Dict[str, MediaItem] = {}
        self.catalogs: Dict[str, List[MediaItem]] = {}
        for item in items or []:
            self.add(item)

    def add(self, item: MediaItem) -> None:
        if item.id in self.items:
            logger.warning(f"Duplicate item id {item.id} for {item.rel_path}, keeping {self.items[item.id].rel_path}")
            return
        self.items[item.id] = item
        self.catalogs.setdefault(item.catalog, []).append(item)

    def get(self, item_id: str) -> Optional[MediaItem]:
        return self.items.get(item_id)

    def catalog(self, catalog_id: str) -> Optional[List[MediaItem]]:
        return self.catalogs.get(catalog_id)

    def catalog_ids(self) -> List[str]:
        return sorted(self.catalogs)

    def search(self, catalog_id: str, query: str) -> List[MediaItem]:
        """Items of a catalog whose display title contains the query, ignoring case."""
        needle = query.strip().lower()
        return [item for item in self.catalogs.get(catalog_id, []) if needle in item.display_title.lower()]

    def __len__(self) -> int:
        return len(self.items)


def _find_subtitles(media_dir: Path, folder: Path, base_name: str, file_names: List[str]) -> List[Subtitle]:
    """Subtitle files in the folder whose name contains the video base name."""
    needle = base_name.lower()
    subtitles = []
    for file_name in file_names:
        if Path(file_name).suffix.lower() not in SUBTITLE_EXTENSIONS:
            continue
        if needle not in file_name.lower():
            continue
        rel_path = (folder / file_name).relative_to(media_dir).as_posix()
        subtitles.append(Subtitle(
            id=Path(file_name).stem,
            rel_path=rel_path,
            lang=detect_subtitle_language(file_name)
        ))
    return subtitles


def scan_media_dir(media_dir) -> MediaLibrary:
    """
    Walk the media dir and collect every video with its subtitles.

    Each top-level folder becomes a catalog; videos directly in the media dir
    go to the "Local" catalog. Unreadable folders are skipped.

    Args:
        media_dir: Root folder with media files

    Returns:
        MediaLibrary with the discovered items
    """
    media_dir = Path(media_dir)
    library = MediaLibrary(media_dir)

    if not media_dir.is_dir():
        logger.warning(f"Media dir {media_dir} does not exist or is not a directory")
        return library

    def _on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable folder: {error}")

    for root, dir_names, file_names in os.walk(media_dir, onerror=_on_error):
        dir_names.sort()
        file_names.sort()
        folder = Path(root)
        for file_name in file_names:
            path = folder / file_name
            if path.suffix.lower() not in VIDEO_EXTENSIONS:
                continue

            rel_path = path.relative_to(media_dir).as_posix()
            parts = rel_path.split('/')
            catalog = parts[0] if len(parts) > 1 else ROOT_CATALOG

            library.add(MediaItem(
                id=generate_item_id(rel_path),
                title=path.stem,
                rel_path=rel_path,
                catalog=catalog,
                subtitles=_find_subtitles(media_dir, folder, path.stem, file_names)
            ))

    logger.info(f"Scan complete: {len(library)} items in {len(library.catalogs)} catalogs")
    return library
