"""Mutation guard - single decision point for write endpoints."""

import logging

from convention_hub.application.ports import GuardVerdict, PermissionResolver
from convention_hub.domain.entities import User
from convention_hub.domain.exceptions import AuthorizationDenied
from convention_hub.domain.value_objects import Capability, ResourceRef

logger = logging.getLogger(__name__)


class CapabilityGuard:
    """Checks a required capability against the resolver's answer."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    async def evaluate(
        self, user: User | None, resource: ResourceRef, capability: Capability
    ) -> GuardVerdict:
        """Return a verdict. NotFound and Unauthenticated propagate from the resolver."""
        capabilities = await self._resolver.resolve(user, resource)
        if capability in capabilities:
            return GuardVerdict(True, capability, resource, "capability granted")
        return GuardVerdict(False, capability, resource, f"missing {capability}")

    async def require(
        self, user: User | None, resource: ResourceRef, capability: Capability
    ) -> None:
        """Raise AuthorizationDenied unless the user holds the capability."""
        verdict = await self.evaluate(user, resource, capability)
        if not verdict.allowed:
            logger.warning(
                "Denied %s on %s for user %s: %s",
                capability,
                resource,
                user.id if user else None,
                verdict.reason,
            )
            raise AuthorizationDenied(capability, resource)
