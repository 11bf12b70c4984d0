"""
Models package for the NZ spelling converter.

Pydantic models for API requests and responses.
"""

from .api_models import (
    ConvertRequest,
    ConvertResponse,
    MappingsRequest,
    CorrectionsResponse,
    MappingsResponse,
    HealthResponse,
    StandardErrorResponse,
)

__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "MappingsRequest",
    "CorrectionsResponse",
    "MappingsResponse",
    "HealthResponse",
    "StandardErrorResponse",
]
