# students_api/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from students_api.core.exceptions import (
    BaseAPIException,
    NotFoundError,
    NotFoundException,
    QueryError,
    StorageError,
    ValidationException,
    WriteError,
)
from students_api.core.logging import logger


def _error_response(exc: BaseAPIException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details
            }
        },
    )

# 1. Handle Custom Logic Errors (raised by our own code)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return _error_response(exc)

# 2. Handle Storage Errors: the only place a storage failure becomes a status code
async def storage_exception_handler(request: Request, exc: StorageError):
    if isinstance(exc, NotFoundError):
        return _error_response(
            NotFoundException(str(exc), details={"id": exc.student_id})
        )

    if isinstance(exc, WriteError):
        code = "WRITE_ERROR"
    elif isinstance(exc, QueryError):
        code = "QUERY_ERROR"
    else:
        code = "STORAGE_ERROR"

    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return _error_response(BaseAPIException(message=str(exc), code=code))

# 3. Handle Validation Errors (Pydantic rejects the body or a path parameter)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.email" or just "email")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field or "body"] = error["msg"]

    return _error_response(ValidationException(details=details))

# 4. Handle Standard HTTP Errors (404 on unknown URL, 405, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "details": None
            }
        },
        headers=getattr(exc, "headers", None),
    )

# 5. Handle General System Errors (bugs, library failures)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred.",
                "details": None
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
