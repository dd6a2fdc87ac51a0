"""Validation rules applied to rotation requests before a job starts."""
from typing import List, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, constr, field_validator, model_validator

from ..domain.entities.rotation_job import normalize_angle
from ..domain.exceptions import RotationValidationError

INVALID_FILE_NAME_CHARS = frozenset('<>:"/\\|?*') | frozenset(chr(c) for c in range(32))


def validate_angle(angle: int) -> int:
    """Return the normalized angle, rejecting anything that is not a multiple of 90."""
    normalized = normalize_angle(angle)
    if normalized % 90 != 0:
        raise RotationValidationError("The rotation angle must be a multiple of 90 degrees.")
    return normalized


def validate_suffix(suffix: Optional[str]) -> str:
    """Strip the suffix and reject characters that cannot appear in a file name."""
    value = (suffix or "").strip()
    if any(ch in INVALID_FILE_NAME_CHARS for ch in value):
        raise RotationValidationError("The suffix contains invalid file name characters.")
    return value


def resolve_output_folder(output_folder: Optional[str], input_folder: Optional[str]) -> str:
    """Fall back to the input folder when no output folder was chosen."""
    if output_folder and output_folder.strip():
        return output_folder
    if input_folder and input_folder.strip():
        return input_folder
    raise RotationValidationError("Please select an output folder.")


class RotationRequestModel(BaseModel):
    """Strict validation model for rotation requests."""

    files: Optional[List[constr(strip_whitespace=True, min_length=1)]] = Field(
        None, description="Ordered source image paths; listed from input_folder when omitted"
    )
    input_folder: Optional[str] = Field(None, description="Folder whose supported images are rotated")
    output_folder: Optional[str] = Field(None, description="Destination folder; defaults to input_folder")
    angle: int = Field(90, description="Clockwise rotation in degrees, multiple of 90")
    suffix: str = Field("", description="Name suffix, may contain {angle}; blank means _r<angle>")
    overwrite: bool = Field(False, description="Overwrite existing files instead of numbering them")
    callback_url: AnyUrl | None = Field(None, description="Receives the job result when the job ends")

    model_config = ConfigDict(extra="forbid")  # Reject unknown fields

    @field_validator("angle")
    @classmethod
    def _check_angle(cls, value: int) -> int:
        return validate_angle(value)

    @field_validator("suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        return validate_suffix(value)

    @model_validator(mode="after")
    def _check_sources(self) -> "RotationRequestModel":
        if not self.files and not (self.input_folder and self.input_folder.strip()):
            raise ValueError("files or input_folder is required")
        self.output_folder = resolve_output_folder(self.output_folder, self.input_folder)
        return self
