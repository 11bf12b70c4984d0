"""
Core infrastructure for the NZ spelling converter.
Provides exceptions, error handlers, logging and the service container.
"""

from .exceptions import (
    ErrorCode,
    ConverterException,
    InitializationError,
    NotInitializedError,
    InvalidInputError,
    PersistenceError,
)

__all__ = [
    "ErrorCode",
    "ConverterException",
    "InitializationError",
    "NotInitializedError",
    "InvalidInputError",
    "PersistenceError",
]
