"""Permission history change types."""

from enum import StrEnum


class PermissionChangeType(StrEnum):
    """Kinds of permission-affecting events recorded in the ledger."""

    GRANTED = "GRANTED"
    REVOKED = "REVOKED"
    ROLE_CHANGED = "ROLE_CHANGED"
    PER_EDITIONS_UPDATED = "PER_EDITIONS_UPDATED"
    ARCHIVED = "ARCHIVED"
    UNARCHIVED = "UNARCHIVED"
