"""Rotation router - Endpoints for batch rotation jobs."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query

from ...domain.exceptions import JobNotFoundError
from ...validations.rotation_request import RotationRequestModel
from ..controllers.rotation_controller import (
    handle_cancel_rotation,
    handle_get_rotation,
    handle_list_images,
    handle_start_rotation,
)
from ..dtos.rotation_models import ImageListResponse, RotationJobResponse, RotationJobStartedResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Rotation"])


@router.get("/images", response_model=ImageListResponse)
async def list_images(folder: str = Query(..., min_length=1)) -> Dict[str, Any]:
    """List rotatable images in a folder."""
    try:
        return handle_list_images(folder)
    except ValueError as e:
        logger.warning(f"Validation error in list_images: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/rotations", status_code=202, response_model=RotationJobStartedResponse)
async def start_rotation(payload: RotationRequestModel) -> Dict[str, Any]:
    """
    Start rotating a batch of images in the background.

    Poll GET /rotations/{job_id} for progress and the terminal outcome.
    """
    try:
        return handle_start_rotation(payload)
    except ValueError as e:
        logger.warning(f"Validation error in start_rotation: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/rotations/{job_id}", response_model=RotationJobResponse)
async def get_rotation(job_id: str) -> Dict[str, Any]:
    """Get status, progress events and outcome of a rotation job."""
    try:
        return handle_get_rotation(job_id)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/rotations/{job_id}/cancel", response_model=RotationJobResponse)
async def cancel_rotation(job_id: str) -> Dict[str, Any]:
    """Request cancellation of a running rotation job."""
    try:
        return handle_cancel_rotation(job_id)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
