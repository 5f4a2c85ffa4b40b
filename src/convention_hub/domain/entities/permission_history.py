"""Permission history entry - immutable audit record."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from convention_hub.domain.value_objects import PermissionChangeType


@dataclass(frozen=True)
class PermissionHistoryEntry:
    """Who changed which permission state on a convention, with snapshots."""

    id: UUID
    convention_id: UUID
    actor_id: str
    change_type: PermissionChangeType
    created_at: datetime
    target_user_id: str | None = None
    before: dict[str, Any] | None = None
    after: dict[str, Any] | None = None
