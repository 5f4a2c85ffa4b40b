"""JSON shapes of domain objects."""

from typing import Any

from convention_hub.domain.entities import (
    Collaborator,
    Convention,
    Edition,
    PermissionHistoryEntry,
)
from convention_hub.domain.value_objects import Capability


def convention_to_dict(c: Convention) -> dict[str, Any]:
    return {
        "id": str(c.id),
        "name": c.name,
        "description": c.description,
        "author_id": c.author_id,
        "is_archived": c.is_archived,
        "archived_at": c.archived_at.isoformat() if c.archived_at else None,
        "created_at": c.created_at.isoformat(),
        "updated_at": c.updated_at.isoformat(),
    }


def edition_to_dict(e: Edition) -> dict[str, Any]:
    return {
        "id": str(e.id),
        "convention_id": str(e.convention_id),
        "creator_id": e.creator_id,
        "name": e.name,
        "start_date": e.start_date.isoformat() if e.start_date else None,
        "end_date": e.end_date.isoformat() if e.end_date else None,
        "created_at": e.created_at.isoformat(),
        "updated_at": e.updated_at.isoformat(),
    }


def collaborator_to_dict(c: Collaborator) -> dict[str, Any]:
    return {
        "id": str(c.id),
        "user_id": c.user_id,
        "title": c.title,
        "added_by_id": c.added_by_id,
        "added_at": c.added_at.isoformat(),
        "rights": {cap.value: cap in c.capabilities for cap in Capability},
        "per_edition": [
            {"edition_id": str(g.edition_id), "can_edit": g.can_edit, "can_delete": g.can_delete}
            for g in c.per_edition
        ],
    }


def history_entry_to_dict(e: PermissionHistoryEntry) -> dict[str, Any]:
    return {
        "id": str(e.id),
        "change_type": e.change_type.value,
        "actor_id": e.actor_id,
        "target_user_id": e.target_user_id,
        "before": e.before,
        "after": e.after,
        "created_at": e.created_at.isoformat(),
    }


def capabilities_to_list(capabilities: frozenset[Capability]) -> list[str]:
    return sorted(c.value for c in capabilities)
