"""
Domain Entities - Item

A minimal generic resource served by the API. It carries no business
rules beyond naming and timestamps, and exists so the service has state
that tests can create, read and delete.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from src.domain.entities.errors import ItemValidationError

MAX_NAME_LENGTH = 200


@dataclass
class Item:
    """A named resource with free-form attributes."""

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    description: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = datetime.now(timezone.utc)

    def validate(self) -> None:
        """Raise ItemValidationError when the item cannot be stored."""
        name = self.name.strip()
        if not name:
            raise ItemValidationError("Item name must not be blank")
        if len(name) > MAX_NAME_LENGTH:
            raise ItemValidationError(
                f"Item name must be at most {MAX_NAME_LENGTH} characters",
                details={"length": len(name)},
            )
