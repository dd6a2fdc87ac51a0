"""Service for posting rotation job results to callback URLs."""
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


def post_callback(
    callback_url: str,
    job_id: str,
    status: str,
    processed: int,
    total: int,
    error_message: Optional[str] = None,
    timeout: int = 30
) -> bool:
    """Post rotation job result to callback URL.

    Args:
        callback_url: The callback URL to post to
        job_id: Rotation job ID
        status: Terminal job status (SUCCESS, CANCELLED or FAIL)
        processed: Files written before the job ended
        total: Files in the job
        error_message: Optional error message
        timeout: Request timeout in seconds

    Returns:
        True if callback was successful, False otherwise
    """
    payload: Dict[str, Any] = {
        "job_id": job_id,
        "status": status,
        "processed": processed,
        "total": total,
        "error_message": error_message
    }

    try:
        response = requests.post(
            callback_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout
        )
    except requests.exceptions.Timeout:
        logger.error(f"Callback POST timeout for job_id={job_id} to {callback_url}")
        return False
    except requests.exceptions.RequestException as e:
        logger.error(f"Callback POST error for job_id={job_id} to {callback_url}: {e}")
        return False

    if 200 <= response.status_code < 300:
        logger.info(f"Successfully posted callback for job_id={job_id} to {callback_url}")
        return True

    logger.warning(
        f"Callback POST failed for job_id={job_id} to {callback_url}: "
        f"status_code={response.status_code}, response={response.text}"
    )
    return False
