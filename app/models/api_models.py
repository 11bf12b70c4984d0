"""
API request and response models for the NZ spelling converter.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import uuid


class ConvertRequest(BaseModel):
    """Body of POST /convert. ``text`` takes precedence over ``data``."""
    text: Optional[Any] = None
    data: Optional[Any] = None


class ConvertResponse(BaseModel):
    converted: Any


class MappingsRequest(BaseModel):
    """Body of POST /corrections and POST /mappings"""
    corrections: Optional[Dict[str, Any]] = None
    mappings: Optional[Dict[str, Any]] = None

    def pairs(self) -> Optional[Dict[str, Any]]:
        return self.corrections if self.corrections is not None else self.mappings


class CorrectionsResponse(BaseModel):
    message: Optional[str] = None
    corrections: Dict[str, str]


class MappingsResponse(BaseModel):
    message: Optional[str] = None
    mappings: Dict[str, str]


class HealthResponse(BaseModel):
    status: str
    initialized: bool
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    details: Dict[str, Any] = Field(default_factory=dict)


class StandardErrorResponse(BaseModel):
    """Standardized error response format"""
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('error_code')
    @classmethod
    def validate_error_code(cls, v):
        if not v or not v.isupper():
            raise ValueError("error_code must be a non-empty uppercase string")
        return v
