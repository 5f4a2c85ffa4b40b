"""Reference to an authorization target."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class ResourceKind(StrEnum):
    CONVENTION = "convention"
    EDITION = "edition"


@dataclass(frozen=True)
class ResourceRef:
    """Convention or edition targeted by a permission check."""

    kind: ResourceKind
    id: UUID

    @classmethod
    def convention(cls, convention_id: UUID) -> "ResourceRef":
        return cls(ResourceKind.CONVENTION, convention_id)

    @classmethod
    def edition(cls, edition_id: UUID) -> "ResourceRef":
        return cls(ResourceKind.EDITION, edition_id)

    def __str__(self) -> str:
        return f"{self.kind}:{self.id}"
