"""Persistent settings backing the one-time partial image check."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

log = logging.getLogger(__name__)

CHECKED_PARTIAL_IMAGES = "checked_partial_images"


class SettingsStore:
    """
    JSON file of application settings.

    Missing or unreadable files read as empty settings; the file is rewritten
    in full on every change.
    """

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            log.warning(f"Ignoring settings file {self.path}: not a JSON object")
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def did_check_partial_images(self) -> bool:
        return bool(self._read().get(CHECKED_PARTIAL_IMAGES, False))

    def set_checked_partial_images(self) -> None:
        data = self._read()
        data[CHECKED_PARTIAL_IMAGES] = True
        self._write(data)

    def clear_checked_partial_images(self) -> None:
        data = self._read()
        if data.pop(CHECKED_PARTIAL_IMAGES, None) is not None:
            self._write(data)
