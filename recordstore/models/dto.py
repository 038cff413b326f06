"""Data Transfer Objects - API contracts."""

from pydantic import BaseModel, Field
from typing import Any, Dict


class CreatedResponse(BaseModel):
    """Response after a record is created."""
    id: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    data: Dict[str, Any] = Field(default_factory=dict)
