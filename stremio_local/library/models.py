"""Media library data models."""
import re
from pydantic import BaseModel, Field
from typing import List, Optional

from stremio_local.metadata import normalize_title

_YEAR = re.compile(r'(?<!\d)(19\d{2}|20\d{2})(?!\d)')


class Subtitle(BaseModel):
    """A subtitle file next to a video."""
    id: str = Field(..., description="Subtitle file name without extension")
    rel_path: str = Field(..., description="POSIX path relative to the media dir")
    lang: str = Field("Unknown", description="Language name derived from the file name")


class MediaItem(BaseModel):
    """Represents a single video file in the media dir."""
    id: str = Field(..., description="Stable addon id derived from the relative path")
    title: str = Field(..., description="Raw file name without extension")
    rel_path: str = Field(..., description="POSIX path relative to the media dir")
    catalog: str = Field(..., description="Catalog the item is listed in")
    subtitles: List[Subtitle] = Field(default_factory=list)

    @property
    def display_title(self) -> str:
        """Cleaned title for display; the raw name when cleaning leaves nothing."""
        return normalize_title(self.title) or self.title

    @property
    def year(self) -> Optional[int]:
        """First plausible release year in the raw name, if any."""
        match = _YEAR.search(self.title)
        return int(match.group(1)) if match else None

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.display_title} [{self.catalog}/{self.rel_path}]"
