"""Role templates for new collaborators."""

from enum import StrEnum

from convention_hub.domain.value_objects.capability import ALL_CAPABILITIES, Capability


class CollaboratorRole(StrEnum):
    """Creation-time template - the stored flags are the authority, not the role."""

    ADMINISTRATOR = "ADMINISTRATOR"
    MODERATOR = "MODERATOR"

    @property
    def capabilities(self) -> frozenset[Capability]:
        if self is CollaboratorRole.ADMINISTRATOR:
            return ALL_CAPABILITIES
        return frozenset({Capability.EDIT_CONVENTION, Capability.ADD_EDITION})
