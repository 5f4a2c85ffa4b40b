"""Permission resolver port - effective capabilities of a user."""

from typing import Protocol

from convention_hub.domain.entities import User
from convention_hub.domain.value_objects import Capability, ResourceRef


class PermissionResolver(Protocol):
    """Port for computing a user's capabilities on a convention or edition."""

    async def resolve(self, user: User | None, resource: ResourceRef) -> frozenset[Capability]: ...

    async def can_view(self, user: User | None, resource: ResourceRef) -> bool: ...
