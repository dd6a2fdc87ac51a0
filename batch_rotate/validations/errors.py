"""Error handling utilities for validation errors."""
from typing import Any, Dict, List, Sequence

from fastapi.responses import JSONResponse


def _format_errors(raw_errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    errors = []
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        error_type = error.get("type", "")
        error_msg = error.get("msg", "")

        # Map specific error types to user-friendly messages
        if error_type == "extra_forbidden":
            error_msg = f"unexpected field '{field}'"
        elif error_type == "missing":
            error_msg = f"{field} is required"
        elif field == "callback_url" and error_type in ["url_parsing", "url_scheme"]:
            error_msg = "Invalid URL"
        elif error_type == "value_error" and error_msg.startswith("Value error, "):
            error_msg = error_msg[len("Value error, "):]

        errors.append({
            "field": field,
            "error": error_msg
        })
    return errors


def create_validation_error_response(validation_error) -> JSONResponse:
    """Convert a pydantic or FastAPI request validation error to the standard error response."""
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request",
            "errors": _format_errors(validation_error.errors())
        }
    )


def create_internal_error_response() -> JSONResponse:
    """Create standardized internal error response."""
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal error",
            "errors": []
        }
    )
