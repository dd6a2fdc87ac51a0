"""
cli.py
- Command line front end for batch rotation
- Usage:
  batch-rotate photos/ --angle 90 --output rotated/ --suffix "_rot{angle}"
  batch-rotate photos/ --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .application.commands.start_rotation_command import StartRotationCommand
from .application.services.image_listing_service import describe_folder, list_images
from .application.use_cases.rotation_use_cases import start_rotation_job
from .config.config import configure_logging, load_rotation_settings
from .domain.entities.processing_state import ProcessingState
from .domain.entities.rotation_job import RotationOutcome
from .domain.exceptions import RotationValidationError
from .validations.rotation_request import resolve_output_folder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def build_parser(default_angle: int = 90) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="batch-rotate", description="Rotate every image in a folder by a multiple of 90 degrees.")
    ap.add_argument("input_folder", help="folder containing the images to rotate")
    ap.add_argument("--output", default="", help="output folder (defaults to the input folder)")
    ap.add_argument("--angle", type=int, default=default_angle, help="clockwise angle, multiple of 90")
    ap.add_argument("--suffix", default="", help="file name suffix, {angle} is replaced (default: _r<angle>)")
    ap.add_argument("--overwrite", action="store_true", help="overwrite existing files instead of numbering them")
    ap.add_argument("--list", action="store_true", help="only list the images that would be rotated")
    return ap


def _print_listing(folder: str) -> None:
    items = describe_folder(folder)
    if not items:
        print("No images found in the selected folder.")
        return
    for item in items:
        print(f"{item.file_name}\t{item.dimensions}\t{item.file_size_text}")
    print(f"Loaded {len(items)} image{'' if len(items) == 1 else 's'}.")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    settings = load_rotation_settings()
    configure_logging(settings)

    args = build_parser(settings.default_angle).parse_args(argv)

    try:
        if args.list:
            _print_listing(args.input_folder)
            return EXIT_OK

        files = list_images(args.input_folder)
        if not files:
            raise RotationValidationError("Load at least one image before rotating.")

        command = StartRotationCommand(
            files=tuple(files),
            output_folder=resolve_output_folder(args.output, args.input_folder),
            angle=args.angle,
            suffix=args.suffix,
            overwrite=args.overwrite,
        )
        handle = start_rotation_job(command)
    except RotationValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    state = ProcessingState().start(handle.job.total)
    print(state.status_text)
    try:
        for event in handle.progress:
            state = state.on_progress(event)
            print(state.status_text)
    except KeyboardInterrupt:
        handle.cancel()
        state = state.request_cancel()
        print(state.status_text)
        for event in handle.progress:
            state = state.on_progress(event)

    result = handle.result()
    state = state.finish(result.outcome)
    print(state.status_text)

    if result.outcome == RotationOutcome.SUCCESS:
        print(f"Finished rotating {result.total} image{'' if result.total == 1 else 's'}.")
        return EXIT_OK
    if result.outcome == RotationOutcome.CANCELLED:
        return EXIT_CANCELLED
    print(f"Rotation failed: {result.error_message}", file=sys.stderr)
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
