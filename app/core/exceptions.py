from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Base class for every error the service raises on purpose.

    Each subclass carries the HTTP status it maps to, so a batch operation
    can let the first failure propagate unchanged to the caller.
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


class BadRequestException(BaseAPIException):
    """400: the request conflicts with stored state (e.g. duplicate id)"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
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


class DeleteNotAppliedException(BaseAPIException):
    """500: the record is still present after the store was told to delete it"""
    def __init__(self, message: str = "Delete was not applied", details: dict = None):
        super().__init__(
            message=message,
            code="DELETE_NOT_APPLIED",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )
