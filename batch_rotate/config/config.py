"""Configuration module for batch-rotate."""
import logging
from dataclasses import dataclass

from .env import get_env, get_int_env


@dataclass(frozen=True)
class RotationSettings:
    """Runtime settings shared by the API and the CLI."""
    log_level: str = "INFO"
    job_history_limit: int = 100
    callback_timeout: int = 30
    default_angle: int = 90


def load_rotation_settings() -> RotationSettings:
    """
    Load rotation settings from environment variables.

    Returns:
        RotationSettings instance

    Raises:
        RuntimeError: If a numeric variable cannot be parsed or is out of range
    """
    log_level = (get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Unknown LOG_LEVEL: {log_level}")

    history_limit = get_int_env("ROTATION_JOB_HISTORY_LIMIT", 100)
    if history_limit < 1:
        raise RuntimeError("ROTATION_JOB_HISTORY_LIMIT must be >= 1")

    callback_timeout = get_int_env("ROTATION_CALLBACK_TIMEOUT", 30)
    if callback_timeout < 1:
        raise RuntimeError("ROTATION_CALLBACK_TIMEOUT must be >= 1")

    return RotationSettings(
        log_level=log_level,
        job_history_limit=history_limit,
        callback_timeout=callback_timeout,
        default_angle=get_int_env("ROTATION_DEFAULT_ANGLE", 90),
    )


def configure_logging(settings: RotationSettings) -> None:
    """Configure root logging the same way for every entrypoint."""
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # Reduce third-party logging to WARNING to reduce noise
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
