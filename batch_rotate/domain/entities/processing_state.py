"""Processing state - Front-end state machine driven by job outcomes and progress."""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..events.rotation_events import RotationProgress
from .rotation_job import RotationOutcome


class ProcessingStatus(str, Enum):
    """Processing status enumeration."""
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    CANCELLING = "CANCELLING"


@dataclass(frozen=True)
class ProcessingState:
    """Processing state - immutable; every transition returns a new instance."""
    status: ProcessingStatus = ProcessingStatus.IDLE
    processed: int = 0
    total: int = 0
    last_outcome: Optional[RotationOutcome] = None
    status_text: str = "Select a folder to begin."

    @property
    def is_processing(self) -> bool:
        return self.status != ProcessingStatus.IDLE

    @property
    def controls_enabled(self) -> bool:
        """Inputs (angle, suffix, overwrite, file list, rotate) are editable only while idle."""
        return self.status == ProcessingStatus.IDLE

    @property
    def can_cancel(self) -> bool:
        return self.status == ProcessingStatus.RUNNING

    def start(self, total: int) -> "ProcessingState":
        """IDLE -> RUNNING. Starting twice is rejected."""
        if self.is_processing:
            raise ValueError(f"Cannot start while {self.status.value}")
        return ProcessingState(
            status=ProcessingStatus.RUNNING,
            processed=0,
            total=total,
            last_outcome=None,
            status_text="Rotating images...",
        )

    def request_cancel(self) -> "ProcessingState":
        """RUNNING -> CANCELLING. Ignored in any other state."""
        if self.status != ProcessingStatus.RUNNING:
            return self
        return replace(self, status=ProcessingStatus.CANCELLING, status_text="Cancelling...")

    def on_progress(self, event: RotationProgress) -> "ProcessingState":
        if not self.is_processing:
            return self
        file_name = event.source_path.replace("\\", "/").rsplit("/", 1)[-1]
        text = self.status_text
        if self.status == ProcessingStatus.RUNNING:
            text = f"Processing {event.processed}/{event.total}: {file_name}"
        return replace(self, processed=event.processed, total=event.total, status_text=text)

    def finish(self, outcome: RotationOutcome) -> "ProcessingState":
        """Any terminal outcome returns to IDLE and re-enables the controls."""
        if outcome == RotationOutcome.SUCCESS:
            return replace(
                self,
                status=ProcessingStatus.IDLE,
                processed=self.total,
                last_outcome=outcome,
                status_text="Rotation completed.",
            )
        if outcome == RotationOutcome.CANCELLED:
            text = "Rotation cancelled."
        else:
            text = "An error occurred."
        return replace(self, status=ProcessingStatus.IDLE, last_outcome=outcome, status_text=text)
