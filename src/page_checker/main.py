"""
Command line entry point for the partial page checker.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .checker import PartialPageChecker
from .config import Config
from .file_utils import PageFileUtils
from .settings import SettingsStore

config = Config()
log = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    debug = verbose or os.environ.get("PAGE_CHECKER_DEBUG", "").lower() == "true"
    log_level = logging.DEBUG if debug else logging.INFO
    log_file = os.environ.get("PAGE_CHECKER_LOG_FILE")
    if log_file:
        logging.basicConfig(
            level=log_level,
            filename=log_file,
            filemode="w",
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
        )
    else:
        logging.basicConfig(
            level=log_level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find and delete partially downloaded page images."
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=config.TOTAL_PAGES,
        help="Total number of pages.",
    )
    parser.add_argument(
        "--width",
        default=config.DEFAULT_WIDTH,
        help="Primary width tag, e.g. _1920.",
    )
    parser.add_argument(
        "--second-width",
        default=None,
        help="Secondary (tablet) width tag. Defaults to --width.",
    )
    parser.add_argument(
        "--images-root",
        type=Path,
        default=config.IMAGES_ROOT,
        help="Directory holding the width<tag> image directories.",
    )
    parser.add_argument(
        "--settings-file",
        type=Path,
        default=config.SETTINGS_FILE,
        help="JSON settings file holding the already-checked flag.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear the already-checked flag before running.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config.load()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    settings = SettingsStore(args.settings_file)
    if args.reset:
        log.info(f"Clearing partial image flag in {args.settings_file}")
        settings.clear_checked_partial_images()

    if settings.did_check_partial_images():
        log.info("Partial images were already checked; use --reset to run again")
        return 0

    if args.images_root is None:
        log.warning("No images root configured, nothing to check")

    second_width = args.second_width or args.width
    checker = PartialPageChecker(settings, PageFileUtils(args.images_root))
    result = checker.check_pages(args.pages, args.width, second_width)
    if result is None:
        return 1

    for width in result.widths:
        log.info(f"{width}: removed {result.deleted[width]} partial pages")
    return 0


if __name__ == "__main__":
    sys.exit(main())
