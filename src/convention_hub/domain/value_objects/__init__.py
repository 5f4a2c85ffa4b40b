"""Domain value objects."""

from convention_hub.domain.value_objects.capability import (
    ALL_CAPABILITIES,
    NO_CAPABILITIES,
    Capability,
    parse_capabilities,
)
from convention_hub.domain.value_objects.change_type import PermissionChangeType
from convention_hub.domain.value_objects.collaborator_role import CollaboratorRole
from convention_hub.domain.value_objects.deletion_outcome import DeletionOutcome
from convention_hub.domain.value_objects.resource_ref import ResourceKind, ResourceRef

__all__ = [
    "ALL_CAPABILITIES",
    "NO_CAPABILITIES",
    "Capability",
    "CollaboratorRole",
    "DeletionOutcome",
    "PermissionChangeType",
    "ResourceKind",
    "ResourceRef",
    "parse_capabilities",
]
