"""Rotation job entity - Domain model for one batch rotation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class RotationOutcome(str, Enum):
    """Terminal outcome of a rotation job."""
    SUCCESS = "SUCCESS"
    CANCELLED = "CANCELLED"
    FAIL = "FAIL"


def normalize_angle(angle: int) -> int:
    """Coerce an angle in degrees into [0, 360)."""
    return ((angle % 360) + 360) % 360


@dataclass(frozen=True)
class RotationJob:
    """Rotation job entity - immutable once the job starts."""
    files: Tuple[str, ...]
    output_folder: str
    angle: int
    suffix: str = ""
    overwrite: bool = False

    @classmethod
    def create(cls, files, output_folder: str, angle: int, suffix: Optional[str] = "", overwrite: bool = False) -> "RotationJob":
        """Build a job from any iterable of paths, normalizing the angle."""
        return cls(
            files=tuple(str(f) for f in files),
            output_folder=str(output_folder),
            angle=normalize_angle(angle),
            suffix=suffix or "",
            overwrite=overwrite,
        )

    @property
    def total(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class RotationResult:
    """Result a rotation job resolves to."""
    outcome: RotationOutcome
    processed: int
    total: int
    error: Optional[BaseException] = field(default=None, compare=False)

    @property
    def error_message(self) -> Optional[str]:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__

    @property
    def succeeded(self) -> bool:
        return self.outcome == RotationOutcome.SUCCESS

    @property
    def cancelled(self) -> bool:
        return self.outcome == RotationOutcome.CANCELLED

    @property
    def failed(self) -> bool:
        return self.outcome == RotationOutcome.FAIL
