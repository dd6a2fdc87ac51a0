"""Image listing service - Enumerates rotatable images in a folder."""
import logging
import os
from pathlib import Path
from typing import List

from PIL import Image

from ...domain.exceptions import RotationValidationError
from ...domain.value_objects.image_info import ImageInfo

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".tif", ".tiff"}


def list_images(folder: str) -> List[str]:
    """
    List supported image files directly inside folder, sorted by path.

    Raises:
        RotationValidationError: If folder does not exist
    """
    root = Path(folder)
    if not root.is_dir():
        raise RotationValidationError(f"Input folder does not exist: {folder}")

    files = [
        str(p) for p in root.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
    ]
    return sorted(files)


def describe_image(file_path: str) -> ImageInfo:
    """Read dimensions from frame 0's header and the size on disk."""
    with open(file_path, "rb") as stream:
        with Image.open(stream) as image:
            width, height = image.size

    return ImageInfo(
        file_path=file_path,
        file_name=os.path.basename(file_path),
        width=width,
        height=height,
        file_size=os.path.getsize(file_path),
    )


def describe_folder(folder: str) -> List[ImageInfo]:
    """Describe every listed image, skipping files whose header cannot be read."""
    items = []
    for file_path in list_images(folder):
        try:
            items.append(describe_image(file_path))
        except OSError as e:
            logger.warning(f"Failed to read image header for {file_path}: {e}")
    return items
