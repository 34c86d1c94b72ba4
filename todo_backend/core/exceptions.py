"""Domain errors raised by the validator, the stores and the transaction layer.

Every error is an ``HTTPException`` so the API layer can let them propagate
untouched; ``error_code`` tells a NotFoundError (404) apart from an
InvalidReferenceError (400) even when the underlying lookup is the same.
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class AppException(HTTPException):
    """Base class for errors surfaced to callers of the task layer."""

    def __init__(self, status_code: int, detail: str, error_code: str,
                 errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code
        self.errors = errors or []


class ValidationError(AppException):
    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task payload failed validation",
            error_code="VALIDATION_ERROR",
            errors=errors,
        )


class NotFoundError(AppException):
    def __init__(self, detail: str = "Task with the given id was not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND",
        )


class InvalidReferenceError(AppException):
    def __init__(self, detail: str = "Invalid taskId!"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="INVALID_REFERENCE",
        )


class TransactionError(AppException):
    def __init__(self, detail: str = "Transaction failed and was rolled back"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="TRANSACTION_FAILED",
        )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error_code": exc.error_code,
            "errors": exc.errors,
        },
    )
