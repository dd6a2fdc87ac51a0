"""Rotation controller - Handles rotation job operations."""
import logging
import uuid
from typing import Any, Dict

from ...application.commands.start_rotation_command import StartRotationCommand
from ...application.services.image_listing_service import describe_folder, list_images
from ...application.use_cases.rotation_use_cases import build_rotation_job, start_rotation_job
from ...config.config import load_rotation_settings
from ...domain.entities.rotation_job import RotationResult
from ...domain.entities.rotation_job_record import JobStatus, RotationJobRecord
from ...domain.exceptions import RotationValidationError
from ...domain.value_objects.cancellation_token import CancellationToken
from ...infrastructure.repositories import job_repository
from ...services.callback_service import post_callback
from ...validations.rotation_request import RotationRequestModel

logger = logging.getLogger(__name__)


def handle_start_rotation(payload: RotationRequestModel) -> Dict[str, Any]:
    """
    Handle rotation job start.

    Lists input_folder when no explicit files were given, registers the job,
    then starts it on a worker. Returns immediately.
    """
    settings = load_rotation_settings()

    files = list(payload.files) if payload.files else list_images(payload.input_folder)
    if not files:
        raise RotationValidationError("Load at least one image before rotating.")

    command = StartRotationCommand(
        files=tuple(files),
        output_folder=payload.output_folder,
        angle=payload.angle,
        suffix=payload.suffix,
        overwrite=payload.overwrite,
        callback_url=str(payload.callback_url) if payload.callback_url else None,
    )
    # Validate before registering so rejected requests leave no record behind
    job = build_rotation_job(command)

    job_id = uuid.uuid4().hex
    token = CancellationToken()
    job_repository.save_job(
        RotationJobRecord(
            job_id=job_id,
            status=JobStatus.PENDING,
            total=job.total,
            output_folder=job.output_folder,
            angle=job.angle,
            callback_url=command.callback_url,
        ),
        cancellation_token=token,
        history_limit=settings.job_history_limit,
    )
    logger.info(f"Registered rotation job {job_id} with {job.total} file(s)")

    def _on_complete(result: RotationResult) -> None:
        record = job_repository.complete_job(job_id, result)
        if record is not None and record.callback_url:
            post_callback(
                record.callback_url,
                job_id=job_id,
                status=record.status.value,
                processed=record.processed,
                total=record.total,
                error_message=record.error_message,
                timeout=settings.callback_timeout,
            )

    start_rotation_job(
        command,
        progress_listener=lambda event: job_repository.record_progress(job_id, event),
        on_complete=_on_complete,
        cancellation_token=token,
    )

    return {"job_id": job_id, "status": JobStatus.PENDING.value, "total": job.total}


def handle_get_rotation(job_id: str) -> Dict[str, Any]:
    """Return the current snapshot of a job."""
    return job_repository.get_job(job_id).to_dict()


def handle_cancel_rotation(job_id: str) -> Dict[str, Any]:
    """Request cancellation; the worker stops before the next file."""
    logger.info(f"Cancellation requested for rotation job {job_id}")
    return job_repository.request_cancel(job_id).to_dict()


def handle_list_images(folder: str) -> Dict[str, Any]:
    """List supported images in a folder with dimensions and sizes."""
    items = describe_folder(folder)
    return {
        "folder": folder,
        "count": len(items),
        "images": [item.to_dict() for item in items],
    }
