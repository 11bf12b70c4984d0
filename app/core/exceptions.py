"""
Custom exceptions for the NZ spelling converter.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Start-up errors
    INITIALIZATION_FAILED = "INITIALIZATION_FAILED"
    NOT_INITIALIZED = "NOT_INITIALIZED"

    # Input errors
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Storage errors
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ConverterException(Exception):
    """Base exception for the spelling converter."""

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


class InitializationError(ConverterException):
    """Raised when dictionaries or mapping tables cannot be loaded."""

    def __init__(self, message: str = "Converter initialization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INITIALIZATION_FAILED,
            details=details,
            status_code=503
        )


class NotInitializedError(ConverterException):
    """Raised when a conversion is requested before start-up finished."""

    def __init__(self):
        super().__init__(
            message="Converter is not initialized",
            error_code=ErrorCode.NOT_INITIALIZED,
            status_code=503
        )


class InvalidInputError(ConverterException):
    """Raised when a value of the wrong type reaches the converter."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_INPUT,
            details=details,
            status_code=400
        )


class PersistenceError(ConverterException):
    """
    Raised when the corrections table cannot be written to disk.
    The in-memory table already holds the update when this is raised.
    """

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Failed to persist corrections to {path}",
            error_code=ErrorCode.PERSISTENCE_FAILED,
            details=details or {"path": path},
            status_code=500
        )
