from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Base class for every error the API renders to the client.
    Keeps the error envelope uniform for callers.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. HTTP ERRORS (rendered by core/handlers.py)
# =========================================================

class ValidationException(BaseAPIException):
    """400: malformed body or parameters, never reaches storage"""
    def __init__(self, message: str = "Input validation failed", details: dict = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )

# =========================================================
# 2. STORAGE ERRORS (raised by the storage layer, no HTTP knowledge)
# =========================================================

class StorageError(Exception):
    """Base class for errors raised by the storage layer."""
    pass


class InitializationError(StorageError):
    """The store could not be opened or the schema could not be created."""
    pass


class NotFoundError(StorageError):
    """No student row matches the requested id."""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"no student found with id {student_id}")


class WriteError(StorageError):
    """An insert, update or delete failed."""
    pass


class QueryError(StorageError):
    """A select failed or its rows could not be read."""
    pass
