"""Domain exceptions."""

from convention_hub.domain.value_objects import Capability, ResourceRef


class ConventionHubError(Exception):
    """Base exception for convention hub."""

    pass


class NotFound(ConventionHubError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class Unauthenticated(ConventionHubError):
    """No acting user was supplied."""

    pass


class AuthorizationDenied(ConventionHubError):
    """User lacks the capability required on the resource.

    The message stays generic; capability and resource are kept for logs.
    capability is None when read access itself was refused.
    """

    def __init__(self, capability: Capability | None, resource: ResourceRef) -> None:
        super().__init__("insufficient rights")
        self.capability = capability
        self.resource = resource


class InvariantViolation(ConventionHubError):
    """Stored data breaks an invariant that correct operation maintains."""

    pass


class Conflict(ConventionHubError):
    """Request conflicts with the current state of the resource."""

    pass


class ValidationError(ConventionHubError):
    """Validation failed for input data."""

    pass
