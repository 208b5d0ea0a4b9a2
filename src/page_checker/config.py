"""Configuration singleton for the partial page checker."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

log = logging.getLogger(__name__)


class Config:
    """Singleton configuration class."""

    _instance: Optional["Config"] = None
    _CONFIG_FILE_PATH = (
        Path.home() / ".config" / "partial-page-checker" / "partial-page-checker.json"
    )

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize all configuration values."""
        # Locations - read from environment variables with defaults
        images_root = os.environ.get("PAGE_CHECKER_IMAGES_ROOT")
        self._images_root: Optional[Path] = Path(images_root) if images_root else None
        self._settings_file = Path(
            os.environ.get(
                "PAGE_CHECKER_SETTINGS_FILE",
                str(self._CONFIG_FILE_PATH.parent / "settings.json"),
            )
        )

        # Page layout
        self.TOTAL_PAGES: int = 604
        self.DEFAULT_WIDTH: str = "_1920"
        self.PAGE_FILE_PATTERN = "page{:03d}.png"
        self.IMAGES_DIR_PREFIX = "width"

        # pages 1 and 2 are not full pages
        self.FIRST_CHECKED_PAGE = 3

        # Partial image detection
        self.SAMPLE_SIZE = 16
        # madani is 8 for 1920, 6 for 1280, 4 or less for smaller. a handful
        # of 1260 pages are slightly shorter, so 6 is the safer default.
        self.ROWS_TO_CHECK: Dict[str, int] = {"_1920": 8}
        self.DEFAULT_ROWS_TO_CHECK = 6

        # Telemetry
        self.PARTIAL_PAGES_EVENT = "partialPagesRemoved"

    def rows_to_check(self, width: str) -> int:
        """Number of bottom rows inspected for a given width tag."""
        return self.ROWS_TO_CHECK.get(width, self.DEFAULT_ROWS_TO_CHECK)

    def load(self) -> None:
        """Load configuration from JSON file."""
        if not self._CONFIG_FILE_PATH.exists():
            return

        try:
            with open(self._CONFIG_FILE_PATH, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(
                f"Ignoring unreadable config file {self._CONFIG_FILE_PATH}: {e}"
            )
            return
        if not isinstance(data, dict):
            log.warning(
                f"Ignoring config file {self._CONFIG_FILE_PATH}: not a JSON object"
            )
            return

        for key, value in data.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)

    @property
    def IMAGES_ROOT(self) -> Optional[Path]:
        """Get the root directory holding the per-width image directories."""
        return self._images_root

    @IMAGES_ROOT.setter
    def IMAGES_ROOT(self, value: Optional[Path]) -> None:
        """Set the images root."""
        self._images_root = Path(value) if value else None

    @property
    def SETTINGS_FILE(self) -> Path:
        """Get the path of the persisted settings file."""
        return self._settings_file

    @SETTINGS_FILE.setter
    def SETTINGS_FILE(self, value: Path) -> None:
        """Set the settings file path."""
        if not value:
            raise ValueError("SETTINGS_FILE cannot be empty")
        self._settings_file = Path(value)
