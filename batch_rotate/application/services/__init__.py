"""Application services package."""
from .path_resolver import build_suffix, resolve_destination_path
from .image_rotation_service import rotate_images, rotate_single_image, run_rotation_job
from .image_listing_service import list_images, describe_image, describe_folder

__all__ = [
    "build_suffix",
    "resolve_destination_path",
    "rotate_images",
    "rotate_single_image",
    "run_rotation_job",
    "list_images",
    "describe_image",
    "describe_folder",
]
