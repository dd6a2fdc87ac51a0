"""Environment variable utilities."""
import os
from typing import Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable with optional default.

    Args:
        name: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def get_int_env(name: str, default: int) -> int:
    """Get integer environment variable, raising RuntimeError on garbage."""
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}")
