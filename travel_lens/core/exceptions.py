"""
Custom exceptions for the travel lens relay.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Client input errors
    MISSING_HEADER = "MISSING_HEADER"
    MISSING_BODY = "MISSING_BODY"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CATEGORY = "INVALID_CATEGORY"

    # Upstream provider errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TravelLensException(Exception):
    """Base exception for the travel lens relay."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ClientInputError(TravelLensException):
    """Raised when the inbound request fails validation; rendered as ``{"message": ...}``."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=400
        )
