"""Convention entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Convention:
    """Convention - an event series owned by its author."""

    id: UUID
    author_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    is_archived: bool = False
    archived_at: datetime | None = None
