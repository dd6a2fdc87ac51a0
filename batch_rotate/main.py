"""FastAPI application entrypoint for batch-rotate."""
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

# Load environment variables from .env file
load_dotenv()

from .config.config import configure_logging, load_rotation_settings  # noqa: E402
from .presentation.routers.rotation_router import router as rotation_router  # noqa: E402
from .validations.errors import create_internal_error_response, create_validation_error_response  # noqa: E402

configure_logging(load_rotation_settings())
logger = logging.getLogger(__name__)

app = FastAPI(title="batch-rotate")

# Include routers
app.include_router(rotation_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    """Handle request body/query validation errors."""
    logger.error(f"Request validation error on {request.url.path}: {exc.errors()}")
    return create_validation_error_response(exc)


@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    logger.error(f"Pydantic validation error on {request.url.path}: {exc.errors()}")
    return create_validation_error_response(exc)


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}")
    return create_internal_error_response()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("batch_rotate.main:app", host="0.0.0.0", port=8000)
