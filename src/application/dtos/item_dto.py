"""
Item DTOs - Application Layer

Request and response payloads for the items endpoints.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.item import MAX_NAME_LENGTH


class ItemCreateDTO(BaseModel):
    """DTO for creating a new item."""

    name: str = Field(
        ..., description="Name of the item", min_length=1, max_length=MAX_NAME_LENGTH
    )
    description: Optional[str] = Field(None, description="Description of the item")
    attributes: Dict[str, Any] = Field(
        default_factory=dict, description="Free-form item attributes"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "widget",
                "description": "A sample widget",
                "attributes": {"color": "blue"},
            }
        }
    }


class ItemResponseDTO(BaseModel):
    """DTO for item responses."""

    id: UUID
    name: str
    description: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "name": "widget",
                "description": "A sample widget",
                "attributes": {"color": "blue"},
                "created_at": "2026-01-10T12:00:00Z",
                "updated_at": "2026-01-10T12:00:00Z",
            }
        }
    }
