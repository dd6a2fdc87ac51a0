"""Image rotation service - Sequential decode/rotate/encode loop over a batch of files."""
import logging
import os
from typing import Callable, Iterable, Optional

from ...domain.entities.rotation_job import RotationJob, normalize_angle
from ...domain.events.rotation_events import RotationProgress
from ...domain.value_objects.cancellation_token import CancellationToken
from ...infrastructure.imaging.codec import (
    decode_first_frame,
    rotate_clockwise,
    select_encoder,
    write_image,
)
from .path_resolver import resolve_destination_path

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[RotationProgress], None]


def rotate_single_image(source_path: str, destination_path: str, angle: int, overwrite: bool) -> None:
    """
    Rotate one image file into destination_path.

    Only frame 0 is decoded; the encoder is chosen from the destination
    extension. Decode and encode errors propagate to the caller.
    """
    frame = decode_first_frame(source_path)
    rotated = rotate_clockwise(frame, normalize_angle(angle))
    encoder = select_encoder(destination_path)
    write_image(rotated, destination_path, encoder, overwrite)


def rotate_images(
    files: Iterable[str],
    output_folder: str,
    angle: int,
    suffix: Optional[str],
    overwrite: bool,
    on_progress: Optional[ProgressCallback] = None,
    cancellation_token: Optional[CancellationToken] = None
) -> int:
    """
    Rotate every file in order, writing results into output_folder.

    Cancellation is checked before each file only; a file that has started
    always runs to completion. The first decode/encode/IO error aborts the
    whole batch.

    Args:
        files: Ordered source paths; order drives processing and progress numbering
        output_folder: Destination folder, created when missing
        angle: Rotation in degrees, clockwise, multiple of 90
        suffix: Optional suffix template (see path_resolver.build_suffix)
        overwrite: Clobber existing destinations instead of numbering them
        on_progress: Called once per completed file, from the calling thread
        cancellation_token: Polled at the top of each iteration

    Returns:
        Number of files processed

    Raises:
        RotationCancelled: If cancellation was requested before a file started
        OSError: On any read, decode, write or folder creation failure
    """
    file_list = [str(f) for f in files]
    total = len(file_list)
    if total == 0:
        return 0

    normalized = normalize_angle(angle)
    os.makedirs(output_folder, exist_ok=True)

    processed = 0
    for source_path in file_list:
        if cancellation_token is not None:
            cancellation_token.raise_if_cancellation_requested(processed, total)

        destination_path = resolve_destination_path(output_folder, source_path, normalized, suffix, overwrite)
        logger.debug("Rotating %s -> %s (%d°)", source_path, destination_path, normalized)
        rotate_single_image(source_path, destination_path, normalized, overwrite)

        processed += 1
        if on_progress is not None:
            on_progress(RotationProgress(processed, total, source_path, destination_path))

    return processed


def run_rotation_job(
    job: RotationJob,
    on_progress: Optional[ProgressCallback] = None,
    cancellation_token: Optional[CancellationToken] = None
) -> int:
    """Run a RotationJob synchronously on the current thread."""
    return rotate_images(
        job.files,
        job.output_folder,
        job.angle,
        job.suffix,
        job.overwrite,
        on_progress=on_progress,
        cancellation_token=cancellation_token,
    )
