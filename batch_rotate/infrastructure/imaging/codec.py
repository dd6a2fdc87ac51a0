"""Pillow adapter - decoding, lossless right-angle rotation and extension-driven encoding."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from PIL import Image

logger = logging.getLogger(__name__)

# Constants
JPEG_QUALITY = 95

# Clockwise angle -> Pillow transpose (Pillow's ROTATE_* constants are counterclockwise)
CLOCKWISE_TRANSPOSE = {
    90: Image.Transpose.ROTATE_270,
    180: Image.Transpose.ROTATE_180,
    270: Image.Transpose.ROTATE_90,
}

# Modes each encoder writes natively; anything else is converted first
_NATIVE_MODES = {
    "JPEG": {"1", "L", "RGB", "CMYK"},
    "PNG": {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"},
    "BMP": {"1", "L", "P", "RGB", "RGBA"},
}


@dataclass(frozen=True)
class EncoderSpec:
    """Pillow format name plus save() keyword arguments."""
    format: str
    params: Dict[str, Any] = field(default_factory=dict)


def select_encoder(destination_path: str) -> EncoderSpec:
    """Pick the encoder from the destination extension, case-insensitive. Unknown -> PNG."""
    extension = os.path.splitext(destination_path)[1].lower()
    if extension in (".jpg", ".jpeg"):
        return EncoderSpec("JPEG", {"quality": JPEG_QUALITY})
    if extension == ".png":
        return EncoderSpec("PNG")
    if extension == ".bmp":
        return EncoderSpec("BMP")
    if extension == ".gif":
        return EncoderSpec("GIF")
    if extension in (".tif", ".tiff"):
        return EncoderSpec("TIFF")
    return EncoderSpec("PNG")


def decode_first_frame(source_path: str) -> Image.Image:
    """
    Decode frame 0 of the image at source_path into memory.

    The file handle is only held while decoding. Multi-frame images
    (animated GIF, multi-page TIFF) are not iterated.

    Raises:
        FileNotFoundError: If the source does not exist
        PIL.UnidentifiedImageError: If the content is not a decodable image
        OSError: If the image data is truncated or unreadable
    """
    with open(source_path, "rb") as stream:
        with Image.open(stream) as image:
            image.seek(0)
            image.load()
            return image.copy()


def rotate_clockwise(image: Image.Image, angle: int) -> Image.Image:
    """
    Rotate image clockwise by a normalized multiple of 90 degrees.

    0 returns the same image object; 90/180/270 use a transpose, so no
    pixel is resampled.
    """
    if angle == 0:
        return image
    transpose = CLOCKWISE_TRANSPOSE.get(angle)
    if transpose is None:
        raise ValueError(f"Unsupported rotation angle: {angle}")
    return image.transpose(transpose)


def _flatten_alpha(image: Image.Image) -> Image.Image:
    # Alpha channel: composite onto a white background
    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, (255, 255, 255))
    background.paste(rgba, mask=rgba.split()[-1])
    return background


def prepare_for_encoder(image: Image.Image, encoder: EncoderSpec) -> Image.Image:
    """Convert the pixel mode when the target encoder cannot store it as-is."""
    native = _NATIVE_MODES.get(encoder.format)
    if native is None or image.mode in native:
        return image

    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    if encoder.format == "JPEG":
        if has_alpha:
            return _flatten_alpha(image)
        return image.convert("RGB")
    return image.convert("RGBA" if has_alpha else "RGB")


def write_image(image: Image.Image, destination_path: str, encoder: EncoderSpec, overwrite: bool) -> None:
    """
    Encode image into destination_path.

    overwrite=True creates or truncates; overwrite=False creates exclusively
    and raises FileExistsError if anything is already there.
    """
    Path(destination_path).parent.mkdir(parents=True, exist_ok=True)

    prepared = prepare_for_encoder(image, encoder)
    mode = "wb" if overwrite else "xb"
    with open(destination_path, mode) as stream:
        prepared.save(stream, format=encoder.format, **encoder.params)
    logger.debug("Encoded %s as %s", destination_path, encoder.format)
