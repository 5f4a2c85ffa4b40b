"""Edition repository port."""

from typing import Protocol
from uuid import UUID

from convention_hub.domain.entities import Edition


class EditionRepository(Protocol):
    """Port for edition persistence."""

    async def get_by_id(self, edition_id: UUID) -> Edition | None: ...

    async def count_by_convention(self, convention_id: UUID) -> int: ...

    async def create(self, edition: Edition) -> Edition: ...

    async def update(self, edition: Edition) -> None: ...

    async def delete(self, edition_id: UUID) -> None: ...
