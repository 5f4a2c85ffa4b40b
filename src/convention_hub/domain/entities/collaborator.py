"""Collaborator entity - a user's grant on a convention."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from convention_hub.domain.value_objects import ALL_CAPABILITIES, Capability

CREATOR_TITLE = "Creator"


@dataclass(frozen=True)
class EditionGrant:
    """Per-edition rights held by one collaborator."""

    edition_id: UUID
    can_edit: bool = False
    can_delete: bool = False

    def snapshot(self) -> dict[str, Any]:
        return {
            "editionId": str(self.edition_id),
            "canEdit": self.can_edit,
            "canDelete": self.can_delete,
        }


@dataclass
class Collaborator:
    """Collaborator - capability flags of one user on one convention."""

    id: UUID
    convention_id: UUID
    user_id: str
    capabilities: frozenset[Capability]
    added_at: datetime
    title: str | None = None
    added_by_id: str | None = None
    per_edition: list[EditionGrant] = field(default_factory=list)

    @property
    def has_full_capabilities(self) -> bool:
        return self.capabilities >= ALL_CAPABILITIES

    def grant_for_edition(self, edition_id: UUID) -> EditionGrant | None:
        for grant in self.per_edition:
            if grant.edition_id == edition_id:
                return grant
        return None

    def snapshot(self) -> dict[str, Any]:
        """State captured in permission history before/after a change."""
        return {
            "title": self.title,
            "rights": {c.value: c in self.capabilities for c in Capability},
            "perEdition": [
                g.snapshot() for g in sorted(self.per_edition, key=lambda g: str(g.edition_id))
            ],
        }
