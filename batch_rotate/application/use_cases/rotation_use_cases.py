"""Rotation use cases - Start a batch rotation on a worker and map its terminal outcome."""
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Optional

from ...domain.entities.rotation_job import RotationJob, RotationOutcome, RotationResult
from ...domain.events.rotation_events import RotationProgress
from ...domain.exceptions import RotationCancelled
from ...domain.value_objects.cancellation_token import CancellationToken
from ...infrastructure.worker.job_worker import run_in_worker
from ...infrastructure.worker.progress_channel import ProgressChannel
from ...validations.rotation_request import resolve_output_folder, validate_angle, validate_suffix
from ..commands.start_rotation_command import StartRotationCommand
from ..services.image_rotation_service import run_rotation_job

logger = logging.getLogger(__name__)


@dataclass
class RotationJobHandle:
    """What the caller holds while a job runs on the worker."""
    job: RotationJob
    future: "Future[RotationResult]"
    progress: ProgressChannel
    cancellation_token: CancellationToken

    def cancel(self) -> None:
        self.cancellation_token.cancel()

    def done(self) -> bool:
        return self.future.done()

    def result(self, timeout: Optional[float] = None) -> RotationResult:
        return self.future.result(timeout=timeout)


def execute_rotation_job(
    job: RotationJob,
    on_progress: Optional[Callable[[RotationProgress], None]] = None,
    cancellation_token: Optional[CancellationToken] = None
) -> RotationResult:
    """
    Run a job synchronously and fold cancellation and errors into a RotationResult.

    Returns:
        RotationResult with outcome SUCCESS, CANCELLED, or FAIL carrying the cause
    """
    processed = 0

    def _report(event: RotationProgress) -> None:
        nonlocal processed
        processed = event.processed
        if on_progress is not None:
            on_progress(event)

    logger.info(
        f"Starting rotation of {job.total} file(s) by {job.angle}° into {job.output_folder} "
        f"(overwrite={job.overwrite})"
    )
    try:
        run_rotation_job(job, on_progress=_report, cancellation_token=cancellation_token)
    except RotationCancelled:
        logger.info(f"Rotation cancelled after {processed}/{job.total} file(s)")
        return RotationResult(RotationOutcome.CANCELLED, processed, job.total)
    except Exception as e:
        logger.error(f"Rotation failed after {processed}/{job.total} file(s): {e}")
        return RotationResult(RotationOutcome.FAIL, processed, job.total, error=e)

    logger.info(f"Rotation completed: {processed}/{job.total} file(s)")
    return RotationResult(RotationOutcome.SUCCESS, processed, job.total)


def build_rotation_job(command: StartRotationCommand) -> RotationJob:
    """
    Validate a command into an immutable job.

    Raises:
        RotationValidationError: If angle, suffix or output folder are rejected
    """
    angle = validate_angle(command.angle)
    suffix = validate_suffix(command.suffix)
    output_folder = resolve_output_folder(command.output_folder, None)
    return RotationJob.create(command.files, output_folder, angle, suffix, command.overwrite)


def start_rotation_job(
    command: StartRotationCommand,
    progress_listener: Optional[Callable[[RotationProgress], None]] = None,
    on_complete: Optional[Callable[[RotationResult], None]] = None,
    cancellation_token: Optional[CancellationToken] = None
) -> RotationJobHandle:
    """
    Validate the command and run the job on a dedicated worker thread.

    Progress events are always queued on the handle's ProgressChannel.
    progress_listener and on_complete, when given, run on the worker thread
    and must be thread-safe. A caller-owned cancellation_token may be passed
    in; otherwise a fresh one is created.

    Raises:
        RotationValidationError: Before any worker is started
    """
    job = build_rotation_job(command)
    channel = ProgressChannel()
    token = cancellation_token if cancellation_token is not None else CancellationToken()

    def _on_progress(event: RotationProgress) -> None:
        channel.report(event)
        if progress_listener is not None:
            progress_listener(event)

    def _run() -> RotationResult:
        try:
            result = execute_rotation_job(job, _on_progress, token)
        finally:
            channel.close()
        if on_complete is not None:
            try:
                on_complete(result)
            except Exception as e:
                logger.error(f"Completion handler failed: {e}")
        return result

    future = run_in_worker(_run)
    return RotationJobHandle(job=job, future=future, progress=channel, cancellation_token=token)
