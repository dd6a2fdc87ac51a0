"""Start rotation command."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StartRotationCommand:
    """Command to start a new rotation job."""
    files: Tuple[str, ...]
    output_folder: str
    angle: int
    suffix: str = ""
    overwrite: bool = False
    callback_url: Optional[str] = None
