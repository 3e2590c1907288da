"""
Application exceptions and error handling.

Every error leaves the service as a flat JSON body ``{"error": "<message>"}``
with the matching status code. A wrong answer is never an error; grading
outcomes travel in normal 200 responses.
"""

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .logging import get_logger

logger = get_logger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


# Custom Exceptions

class ProofmasterError(Exception):
    """Base exception for ProofMaster service errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class MissingQueryError(ProofmasterError):
    """Raised when the query text is absent or blank"""

    def __init__(self):
        super().__init__(
            message="Missing query parameter",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class QueryNotConfiguredError(ProofmasterError):
    """Raised when no upstream app id is configured"""

    def __init__(self):
        super().__init__(
            message="WOLFRAM_APP_ID not configured. Set it in the service environment.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class UpstreamProxyError(ProofmasterError):
    """Raised when the upstream call fails at the transport level"""

    def __init__(self, error: str):
        super().__init__(
            message=f"Proxy error: {error}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"error": error}
        )


class SessionNotFoundError(ProofmasterError):
    def __init__(self, session_id: str):
        super().__init__(
            message=f"Session '{session_id}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"session_id": session_id}
        )


class ExerciseNotFoundError(ProofmasterError):
    def __init__(self, exercise_id: str):
        super().__init__(
            message=f"Exercise '{exercise_id}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"exercise_id": exercise_id}
        )


class ContentNotFoundError(ProofmasterError):
    """Raised for an unknown section, deck or practice problem"""

    def __init__(self, kind: str, key: Any):
        super().__init__(
            message=f"{kind.capitalize()} '{key}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={kind: key}
        )


class NoActiveItemError(ProofmasterError):
    """Raised when a study action needs an active exercise or drill"""

    def __init__(self, what: str):
        super().__init__(
            message=f"No active {what} in this session",
            status_code=status.HTTP_409_CONFLICT,
            details={"missing": what}
        )


class ValidationError(ProofmasterError):
    """Raised for validation errors"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


# Exception Handlers

async def proofmaster_error_handler(request: Request, exc: ProofmasterError) -> JSONResponse:
    """Handle ProofmasterError exceptions"""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        exc.message,
        extra_data={
            "error_type": exc.__class__.__name__,
            "status_code": exc.status_code,
            "path": request.url.path,
            **exc.details
        }
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTPException, keeping headers such as Allow"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None)
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.warning(
        "Validation error",
        extra_data={"path": request.url.path, "errors": details}
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Request validation failed", "details": details}
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors"""
    logger.exception(
        "Unexpected error occurred",
        extra_data={"path": request.url.path}
    )

    # Don't expose internal errors in production
    message = str(exc) if get_settings().DEBUG else "An internal error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message}
    )


def register_error_handlers(app):
    """Register error handlers with FastAPI app"""
    app.add_exception_handler(ProofmasterError, proofmaster_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
