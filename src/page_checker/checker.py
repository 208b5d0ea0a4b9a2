"""Finds and deletes partially downloaded page images."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .config import Config
from .decoder import DecodedImage, decode_downsampled
from .file_utils import PageFileUtils
from .models.callbacks import CheckerCallbacks, logging_callbacks
from .models.page_models import PageImage
from .models.scan_result import ScanResult, TelemetryEvent
from .settings import SettingsStore

log = logging.getLogger(__name__)


class PartialPageChecker:
    """
    Runs the partial image check once per installation.

    Not safe to run concurrently with itself; callers invoke it once, early.
    """

    def __init__(
        self,
        settings: SettingsStore,
        file_utils: PageFileUtils,
        callbacks: Optional[CheckerCallbacks] = None,
        decode: Callable[[Path, int], DecodedImage] = decode_downsampled,
        config: Optional[Config] = None,
    ) -> None:
        self.settings = settings
        self.file_utils = file_utils
        self.callbacks = callbacks or logging_callbacks()
        self.decode = decode
        self.config = config or Config()

    def check_pages(
        self, number_of_pages: int, width: str, second_width: str
    ) -> Optional[ScanResult]:
        """
        Check all the pages to find and delete partially downloaded images.

        Returns the result of a completed run, or None if the check already
        ran or failed. Failures are logged and leave the check pending.
        """
        if self.settings.did_check_partial_images():
            log.debug("Partial images already checked, skipping")
            return None

        result = ScanResult()
        try:
            result.record(width, self.check_partial_images(width, number_of_pages))
            if width != second_width:
                # only check the second width if it's different
                result.record(
                    second_width,
                    self.check_partial_images(second_width, number_of_pages),
                )
            self.settings.set_checked_partial_images()
        except Exception:
            log.error(
                f"Error while checking partial pages: {width} and {second_width}",
                exc_info=True,
            )
            return None

        log.info(f"Partial page check complete, removed {result.total_deleted}")
        return result

    def check_partial_images(self, width: str, number_of_pages: int) -> int:
        """
        Check for partial images of one width and delete them.

        Each image is decoded at a fraction of its size and the last few rows
        are inspected. If they are blank, the image is assumed to be partial
        and is deleted.
        """
        directory = self.file_utils.images_directory(width)
        if directory is None:
            log.debug(f"No images directory for {width}")
            return 0

        rows_to_check = self.config.rows_to_check(width)
        # pages are all the same size, so this is normally allocated once
        pixels: List[int] = []

        deleted_images = 0
        for page in range(self.config.FIRST_CHECKED_PAGE, number_of_pages + 1):
            path = directory / self.file_utils.page_file_name(page)
            if not path.exists():
                continue

            image = self.decode(path, self.config.SAMPLE_SIZE)
            image_width = image.width
            if len(pixels) != image_width * rows_to_check:
                pixels = [0] * (image_width * rows_to_check)

            image.get_pixels(
                pixels, 0, image.height - rows_to_check, image_width, rows_to_check
            )

            if not any(pixels):
                path.unlink()
                deleted_images += 1
                self.callbacks.on_page_removed(PageImage(page, width, path))

        if deleted_images > 0:
            log.warning(f"Removed {deleted_images} partial pages for {width}")
            self.callbacks.on_event(
                TelemetryEvent(
                    name=self.config.PARTIAL_PAGES_EVENT,
                    attributes={"pagesRemoved": deleted_images, "width": width},
                )
            )
        return deleted_images
