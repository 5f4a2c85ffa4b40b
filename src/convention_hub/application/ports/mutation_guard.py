"""Mutation guard port - gate for every write."""

from dataclasses import dataclass
from typing import Protocol

from convention_hub.domain.entities import User
from convention_hub.domain.value_objects import Capability, ResourceRef


@dataclass(frozen=True)
class GuardVerdict:
    """Authorize/deny decision with the reason behind it."""

    allowed: bool
    capability: Capability
    resource: ResourceRef
    reason: str


class MutationGuard(Protocol):
    """Port checking that a user holds a capability before a mutation."""

    async def evaluate(
        self, user: User | None, resource: ResourceRef, capability: Capability
    ) -> GuardVerdict: ...

    async def require(
        self, user: User | None, resource: ResourceRef, capability: Capability
    ) -> None: ...
