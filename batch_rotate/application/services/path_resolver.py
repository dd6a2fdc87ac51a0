"""Path resolver - Derives destination file names for rotated images."""
import os
import re
from typing import Optional

ANGLE_PLACEHOLDER = "{angle}"
_PLACEHOLDER_PATTERN = re.compile(re.escape(ANGLE_PLACEHOLDER), re.IGNORECASE)


def build_suffix(suffix_template: Optional[str], angle: int) -> str:
    """
    Resolve the effective suffix - pure function.

    Blank template -> "_r<angle>"; a template holding {angle} (any case)
    gets the angle substituted; anything else is used verbatim.
    """
    template = suffix_template or ""
    if not template.strip():
        return f"_r{angle}"
    if _PLACEHOLDER_PATTERN.search(template):
        return _PLACEHOLDER_PATTERN.sub(str(angle), template)
    return template


def resolve_destination_path(
    output_folder: str,
    source_path: str,
    angle: int,
    suffix_template: Optional[str],
    overwrite: bool
) -> str:
    """
    Compute where the rotated copy of source_path is written.

    The source extension is kept verbatim. With overwrite disabled, "_1",
    "_2", ... is appended after the suffix until no filesystem entry exists
    at the candidate. The check is not atomic with the later write.

    Args:
        output_folder: Folder receiving rotated images
        source_path: Image being rotated
        angle: Normalized rotation angle in degrees
        suffix_template: Optional suffix, may contain {angle}
        overwrite: Whether an existing file may be clobbered

    Returns:
        Destination file path
    """
    base_name, extension = os.path.splitext(os.path.basename(source_path))
    suffix = build_suffix(suffix_template, angle)

    candidate = os.path.join(output_folder, f"{base_name}{suffix}{extension}")
    if overwrite:
        return candidate

    counter = 1
    while os.path.lexists(candidate):
        candidate = os.path.join(output_folder, f"{base_name}{suffix}_{counter}{extension}")
        counter += 1

    return candidate
