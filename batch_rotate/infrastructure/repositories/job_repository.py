"""Job repository - In-memory registry of rotation jobs started through the API."""
import logging
from collections import OrderedDict
from threading import Lock
from typing import Dict, List, Optional

from ...domain.entities.rotation_job import RotationResult
from ...domain.entities.rotation_job_record import RotationJobRecord
from ...domain.events.rotation_events import RotationProgress
from ...domain.exceptions import JobNotFoundError
from ...domain.value_objects.cancellation_token import CancellationToken

logger = logging.getLogger(__name__)

_lock = Lock()
_records: "OrderedDict[str, RotationJobRecord]" = OrderedDict()
_tokens: Dict[str, CancellationToken] = {}


def _get_locked(job_id: str) -> RotationJobRecord:
    record = _records.get(job_id)
    if record is None:
        raise JobNotFoundError(job_id)
    return record


def _evict_finished(history_limit: int) -> None:
    finished = [job_id for job_id, r in _records.items() if r.is_terminal()]
    for job_id in finished[:max(0, len(finished) - history_limit)]:
        del _records[job_id]
        _tokens.pop(job_id, None)
        logger.debug(f"Evicted finished job {job_id}")


def save_job(
    record: RotationJobRecord,
    cancellation_token: Optional[CancellationToken] = None,
    history_limit: int = 100
) -> str:
    """Insert or replace a job record; finished jobs beyond history_limit are dropped oldest first."""
    with _lock:
        _records[record.job_id] = record
        if cancellation_token is not None:
            _tokens[record.job_id] = cancellation_token
        _evict_finished(history_limit)
    return record.job_id


def get_job(job_id: str) -> RotationJobRecord:
    with _lock:
        return _get_locked(job_id)


def list_jobs() -> List[RotationJobRecord]:
    with _lock:
        return list(_records.values())


def record_progress(job_id: str, event: RotationProgress) -> None:
    """Append a progress event. Called from the worker thread."""
    with _lock:
        record = _records.get(job_id)
        if record is None:
            return
        _records[job_id] = record.add_progress(event)


def request_cancel(job_id: str) -> RotationJobRecord:
    """Trigger the job's cancellation token and flag it CANCELLING unless already finished."""
    with _lock:
        record = _get_locked(job_id)
        token = _tokens.get(job_id)
        if record.is_terminal() or token is None:
            return record
        token.cancel()
        updated = record.request_cancel()
        _records[job_id] = updated
        return updated


def complete_job(job_id: str, result: RotationResult) -> Optional[RotationJobRecord]:
    """Store the terminal outcome. Called from the worker thread."""
    with _lock:
        record = _records.get(job_id)
        if record is None:
            return None
        updated = record.complete(result)
        _records[job_id] = updated
        _tokens.pop(job_id, None)
        return updated


def clear_jobs() -> None:
    with _lock:
        _records.clear()
        _tokens.clear()
