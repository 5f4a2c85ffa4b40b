"""Archive / unarchive steps shared by the convention use cases.

Both run inside the caller's unit of work so the state change and its
ledger entry commit together. The flag flip is a conditional update: a
convention already in the target state (including one changed by a concurrent
request) is left untouched and nothing is recorded.
"""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from convention_hub.domain.entities import Convention, PermissionHistoryEntry
from convention_hub.domain.value_objects import PermissionChangeType

logger = logging.getLogger(__name__)


async def archive_convention(uow, convention: Convention, actor_id: str) -> Convention:
    now = datetime.now(UTC)
    archived = await uow.conventions.set_archived(convention.id, True, now)
    if archived is None:
        return await uow.conventions.get_by_id(convention.id) or convention

    await uow.permission_history.record(
        PermissionHistoryEntry(
            id=uuid4(),
            convention_id=convention.id,
            actor_id=actor_id,
            change_type=PermissionChangeType.ARCHIVED,
            before={"isArchived": False},
            after={"isArchived": True, "archivedAt": now.isoformat()},
            created_at=now,
        )
    )
    logger.info("Archived convention %s (actor %s)", convention.id, actor_id)
    return archived


async def unarchive_convention(uow, convention: Convention, actor_id: str) -> Convention:
    now = datetime.now(UTC)
    restored = await uow.conventions.set_archived(convention.id, False, now)
    if restored is None:
        return await uow.conventions.get_by_id(convention.id) or convention

    await uow.permission_history.record(
        PermissionHistoryEntry(
            id=uuid4(),
            convention_id=convention.id,
            actor_id=actor_id,
            change_type=PermissionChangeType.UNARCHIVED,
            before={
                "isArchived": True,
                "archivedAt": convention.archived_at.isoformat() if convention.archived_at else None,
            },
            after={"isArchived": False},
            created_at=now,
        )
    )
    logger.info("Unarchived convention %s (actor %s)", convention.id, actor_id)
    return restored
