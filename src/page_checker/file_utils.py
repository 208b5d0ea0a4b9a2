"""Resolution of per-width image directories and page file names."""

from pathlib import Path
from typing import Optional

from .config import Config


class PageFileUtils:
    """Maps width tags and page numbers onto the on-disk image layout."""

    def __init__(self, images_root: Optional[Path], config: Optional[Config] = None):
        self.images_root = images_root
        self.config = config or Config()

    def images_directory(self, width: str) -> Optional[Path]:
        """Directory holding images for ``width``, or None without a root."""
        if self.images_root is None:
            return None
        return self.images_root / f"{self.config.IMAGES_DIR_PREFIX}{width}"

    def page_file_name(self, page: int) -> str:
        return self.config.PAGE_FILE_PATTERN.format(page)
