"""Shared fixtures: page images generated with PIL."""

from pathlib import Path
from typing import List

import pytest
from PIL import Image

from page_checker.file_utils import PageFileUtils
from page_checker.models.callbacks import CheckerCallbacks
from page_checker.models.page_models import PageImage
from page_checker.models.scan_result import TelemetryEvent
from page_checker.settings import SettingsStore

PAGE_SIZE = (320, 640)
OPAQUE = (255, 255, 255, 255)
BLANK = (0, 0, 0, 0)


def write_complete_page(path: Path) -> Path:
    """A fully painted page."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", PAGE_SIZE, color=OPAQUE).save(path, "PNG")
    return path


def write_partial_page(path: Path, painted_corner: bool = False) -> Path:
    """A page whose bottom half was never painted.

    With ``painted_corner`` a single 16x16 block in the bottom left corner is
    painted, which survives the 1/16 downsample as one non-zero pixel.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    width, height = PAGE_SIZE
    img = Image.new("RGBA", PAGE_SIZE, color=BLANK)
    img.paste(OPAQUE, (0, 0, width, height // 2))
    if painted_corner:
        img.paste(OPAQUE, (0, height - 16, 16, height))
    img.save(path, "PNG")
    return path


class RecordingCallbacks:
    def __init__(self):
        self.events: List[TelemetryEvent] = []
        self.removed: List[PageImage] = []
        self.callbacks = CheckerCallbacks(
            on_event=self.events.append, on_page_removed=self.removed.append
        )


@pytest.fixture
def images_root(tmp_path) -> Path:
    return tmp_path / "quran_android"


@pytest.fixture
def file_utils(images_root) -> PageFileUtils:
    return PageFileUtils(images_root)


@pytest.fixture
def settings(tmp_path) -> SettingsStore:
    return SettingsStore(tmp_path / "config" / "settings.json")


@pytest.fixture
def recorder() -> RecordingCallbacks:
    return RecordingCallbacks()
