from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

from blogadmin.core.response.schemas import ErrorDetail


class ServiceException(HTTPException):
    """Base exception raised by the service layer."""

    error_code: str = "SERVICE_ERROR"

    def __init__(
        self,
        detail: Any = "Service error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_details: Optional[List[ErrorDetail]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_details = error_details or []


class NotFoundException(ServiceException):
    error_code = "NOT_FOUND"

    def __init__(self, detail: Any = "Item not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class ValidationException(ServiceException):
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        detail: Any = "Validation error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error_details=error_details,
        )


class ConflictException(ServiceException):
    error_code = "CONFLICT"

    def __init__(
        self,
        detail: Any = "Conflict",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_409_CONFLICT,
            error_details=error_details,
        )
