"""Image info value object - what a folder listing shows for one image."""
from dataclasses import dataclass
from typing import Any, Dict

FILE_SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    """Render a byte count with binary units, at most two decimals, independent of locale."""
    length = float(size_bytes)
    order = 0
    while length >= 1024 and order < len(FILE_SIZE_UNITS) - 1:
        order += 1
        length /= 1024
    number = f"{length:.2f}".rstrip("0").rstrip(".")
    return f"{number} {FILE_SIZE_UNITS[order]}"


@dataclass(frozen=True)
class ImageInfo:
    """Image info - immutable description of one source image."""
    file_path: str
    file_name: str
    width: int
    height: int
    file_size: int

    @property
    def dimensions(self) -> str:
        return f"{self.width} × {self.height}"

    @property
    def file_size_text(self) -> str:
        return format_file_size(self.file_size)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "file_name": self.file_name,
            "width": self.width,
            "height": self.height,
            "dimensions": self.dimensions,
            "file_size": self.file_size,
            "file_size_text": self.file_size_text,
        }
