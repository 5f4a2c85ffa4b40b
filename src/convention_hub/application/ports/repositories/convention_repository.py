"""Convention repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from convention_hub.domain.entities import Convention


class ConventionRepository(Protocol):
    """Port for convention persistence."""

    async def get_by_id(self, convention_id: UUID) -> Convention | None: ...

    async def get_for_update(self, convention_id: UUID) -> Convention | None: ...

    async def create(self, convention: Convention) -> Convention: ...

    async def update(self, convention: Convention) -> None: ...

    async def set_archived(
        self, convention_id: UUID, archived: bool, at: datetime
    ) -> Convention | None: ...

    async def hard_delete(self, convention_id: UUID) -> None: ...
