"""Downsampled decoding of page images with Pillow."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from PIL import Image, ImageFile

log = logging.getLogger(__name__)

PIXEL_MODE = "RGBA"


@contextmanager
def _allow_truncated() -> Iterator[None]:
    """Decode truncated files as far as their data goes."""
    previous = ImageFile.LOAD_TRUNCATED_IMAGES
    ImageFile.LOAD_TRUNCATED_IMAGES = True
    try:
        yield
    finally:
        ImageFile.LOAD_TRUNCATED_IMAGES = previous


class DecodedImage:
    """A decoded, downsampled image exposing packed ARGB pixels."""

    def __init__(self, image: Image.Image):
        self._image = image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def get_pixels(
        self, pixels: List[int], x: int, y: int, width: int, height: int
    ) -> None:
        """
        Copy a rectangular region into ``pixels`` as 32-bit ARGB ints.

        Rows are written one after another starting at index 0. A pixel that
        was never painted is 0.

        Args:
            pixels: Destination buffer, at least ``width * height`` long
            x: Left edge of the region
            y: Top edge of the region
            width: Region width
            height: Region height
        """
        if x < 0 or y < 0 or width <= 0 or height <= 0:
            raise ValueError(
                f"Invalid region ({x}, {y}, {width}x{height}) for "
                f"{self.width}x{self.height} image"
            )
        if x + width > self.width or y + height > self.height:
            raise ValueError(
                f"Region ({x}, {y}, {width}x{height}) exceeds "
                f"{self.width}x{self.height} image"
            )
        if len(pixels) < width * height:
            raise ValueError(
                f"Pixel buffer too small: {len(pixels)} < {width * height}"
            )

        raw = self._image.crop((x, y, x + width, y + height)).tobytes()
        for i in range(width * height):
            r, g, b, a = raw[i * 4 : i * 4 + 4]
            pixels[i] = (a << 24) | (r << 16) | (g << 8) | b


def decode_downsampled(path: Path, sample_size: int) -> DecodedImage:
    """
    Decode an image scaled down by ``sample_size`` in both dimensions.

    The result is ``ceil(dimension / sample_size)`` on each side. Missing data
    at the end of a truncated file decodes as transparent black.
    """
    if sample_size < 1:
        raise ValueError(f"sample_size must be >= 1, got {sample_size}")

    with _allow_truncated():
        with Image.open(path) as img:
            original_size = img.size
            img = img.convert(PIXEL_MODE)

    if sample_size > 1:
        img = img.reduce(sample_size)
    log.debug(f"Decoded {path.name} {original_size} -> {img.size}")
    return DecodedImage(img)
