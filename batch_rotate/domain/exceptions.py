"""Domain exceptions for batch rotation."""


class RotationError(Exception):
    """Base class for batch-rotate errors."""


class RotationValidationError(RotationError, ValueError):
    """Raised when job arguments are rejected before the job starts."""


class RotationCancelled(RotationError):
    """Raised inside the engine when the cancellation token was triggered."""

    def __init__(self, processed: int = 0, total: int = 0):
        super().__init__(f"Rotation cancelled after {processed}/{total} files")
        self.processed = processed
        self.total = total


class JobNotFoundError(RotationError, KeyError):
    """Raised when a job id is unknown to the job registry."""

    def __init__(self, job_id: str):
        super().__init__(job_id)
        self.job_id = job_id

    def __str__(self) -> str:
        return f"Rotation job {self.job_id} not found"
