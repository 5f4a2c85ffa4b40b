"""Collaborator repository port."""

from typing import Protocol
from uuid import UUID

from convention_hub.domain.entities import Collaborator


class CollaboratorRepository(Protocol):
    """Port for collaborator persistence, unique on (convention_id, user_id)."""

    async def get_by_id(self, collaborator_id: UUID) -> Collaborator | None: ...

    async def get_for_convention(
        self, convention_id: UUID, user_id: str
    ) -> Collaborator | None: ...

    async def list_by_convention(self, convention_id: UUID) -> list[Collaborator]: ...

    async def count_by_convention(self, convention_id: UUID) -> int: ...

    async def create(self, collaborator: Collaborator) -> Collaborator: ...

    async def update(self, collaborator: Collaborator) -> None: ...

    async def delete(self, collaborator_id: UUID) -> None: ...
