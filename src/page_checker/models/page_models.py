"""Data models for page images on disk."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class PageImage:
    """Represents a single downloaded page image for one width."""

    page_num: int
    width: str
    path: Path
