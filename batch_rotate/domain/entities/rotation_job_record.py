"""Rotation job record - Status snapshot of a job started through the API."""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..events.rotation_events import RotationProgress
from .rotation_job import RotationOutcome, RotationResult


class JobStatus(str, Enum):
    """Job status enumeration."""
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    CANCELLING = "CANCELLING"
    SUCCESS = "SUCCESS"
    CANCELLED = "CANCELLED"
    FAIL = "FAIL"


_OUTCOME_STATUS = {
    RotationOutcome.SUCCESS: JobStatus.SUCCESS,
    RotationOutcome.CANCELLED: JobStatus.CANCELLED,
    RotationOutcome.FAIL: JobStatus.FAIL,
}


@dataclass(frozen=True)
class RotationJobRecord:
    """Rotation job record - immutable; updates return a new instance."""
    job_id: str
    status: JobStatus
    total: int
    output_folder: str
    angle: int
    processed: int = 0
    events: Tuple[RotationProgress, ...] = ()
    error_message: Optional[str] = None
    callback_url: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    def is_terminal(self) -> bool:
        """Check if job is in terminal state."""
        return self.status in (JobStatus.SUCCESS, JobStatus.CANCELLED, JobStatus.FAIL)

    def add_progress(self, event: RotationProgress) -> "RotationJobRecord":
        status = JobStatus.RUNNING if self.status == JobStatus.PENDING else self.status
        return replace(self, status=status, processed=event.processed, events=self.events + (event,))

    def request_cancel(self) -> "RotationJobRecord":
        if self.is_terminal():
            return self
        return replace(self, status=JobStatus.CANCELLING)

    def complete(self, result: RotationResult) -> "RotationJobRecord":
        return replace(
            self,
            status=_OUTCOME_STATUS[result.outcome],
            processed=result.processed,
            error_message=result.error_message,
            finished_at=datetime.now(timezone.utc),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary."""
        return {
            "job_id": self.job_id,
            "status": self.status.value,
            "processed": self.processed,
            "total": self.total,
            "output_folder": self.output_folder,
            "angle": self.angle,
            "events": [e.to_dict() for e in self.events],
            "error_message": self.error_message,
            "created_at": self.created_at.isoformat(),
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
        }
