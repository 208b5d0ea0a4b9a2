"""Callback definitions for reporting checker activity."""

import logging
from dataclasses import dataclass
from typing import Callable

from .page_models import PageImage
from .scan_result import TelemetryEvent

log = logging.getLogger(__name__)


@dataclass
class CheckerCallbacks:
    """Callbacks the checker calls to report what it did"""

    on_event: Callable[[TelemetryEvent], None]
    on_page_removed: Callable[[PageImage], None]


def logging_callbacks() -> CheckerCallbacks:
    """Default callbacks that only write to the log."""

    def on_event(event: TelemetryEvent) -> None:
        log.info(f"Event {event.name}: {event.attributes}")

    def on_page_removed(page: PageImage) -> None:
        log.debug(f"Removed partial page {page.page_num} ({page.width}): {page.path}")

    return CheckerCallbacks(on_event=on_event, on_page_removed=on_page_removed)
