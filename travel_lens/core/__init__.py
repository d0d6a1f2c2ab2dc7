"""
Core building blocks: logging, exceptions, error handlers, validation and
dependency providers.
"""

from .exceptions import ErrorCode, TravelLensException, ClientInputError
from .error_handlers import ErrorHandler, error_handler, setup_error_handlers
from .logging import configure_logging

__all__ = [
    "ErrorCode",
    "TravelLensException",
    "ClientInputError",
    "ErrorHandler",
    "error_handler",
    "setup_error_handlers",
    "configure_logging",
]
