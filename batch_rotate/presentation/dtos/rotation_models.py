"""Pydantic models for rotation job responses."""
from typing import List, Optional

from pydantic import BaseModel, Field


class RotationProgressModel(BaseModel):
    """Model for one progress event."""
    processed: int = Field(..., description="Files written so far, 1-based")
    total: int = Field(..., description="Files in the job")
    source_path: str = Field(..., description="Image that was rotated")
    destination_path: str = Field(..., description="File that was written")


class RotationJobStartedResponse(BaseModel):
    """Response model for a started rotation job."""
    job_id: str = Field(..., description="Rotation job ID")
    status: str = Field(..., description="Job status")
    total: int = Field(..., description="Files in the job")


class RotationJobResponse(BaseModel):
    """Response model for a rotation job snapshot."""
    job_id: str = Field(..., description="Rotation job ID")
    status: str = Field(..., description="PENDING, RUNNING, CANCELLING, SUCCESS, CANCELLED or FAIL")
    processed: int = Field(..., description="Files written so far")
    total: int = Field(..., description="Files in the job")
    output_folder: str = Field(..., description="Destination folder")
    angle: int = Field(..., description="Normalized clockwise angle")
    events: List[RotationProgressModel] = Field(default_factory=list, description="Progress events in order")
    error_message: Optional[str] = Field(None, description="Failure cause when status is FAIL")
    created_at: str = Field(..., description="Job creation timestamp")
    finished_at: Optional[str] = Field(None, description="Job end timestamp")


class ImageInfoModel(BaseModel):
    """Model for one listed image."""
    file_path: str
    file_name: str
    width: int
    height: int
    dimensions: str
    file_size: int
    file_size_text: str


class ImageListResponse(BaseModel):
    """Response model for a folder listing."""
    folder: str = Field(..., description="Listed folder")
    count: int = Field(..., description="Number of images")
    images: List[ImageInfoModel] = Field(default_factory=list)
