"""Edition entity."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass
class Edition:
    """Edition - one dated running of a convention."""

    id: UUID
    convention_id: UUID
    creator_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    start_date: date | None = None
    end_date: date | None = None
