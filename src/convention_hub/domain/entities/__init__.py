"""Domain entities."""

from convention_hub.domain.entities.collaborator import (
    CREATOR_TITLE,
    Collaborator,
    EditionGrant,
)
from convention_hub.domain.entities.convention import Convention
from convention_hub.domain.entities.edition import Edition
from convention_hub.domain.entities.permission_history import PermissionHistoryEntry
from convention_hub.domain.entities.user import User

__all__ = [
    "CREATOR_TITLE",
    "Collaborator",
    "Convention",
    "Edition",
    "EditionGrant",
    "PermissionHistoryEntry",
    "User",
]
