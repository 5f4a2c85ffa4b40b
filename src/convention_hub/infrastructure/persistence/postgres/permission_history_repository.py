"""PostgreSQL permission history repository - insert and select only."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from convention_hub.domain.entities import PermissionHistoryEntry
from convention_hub.domain.value_objects import PermissionChangeType


class PostgresPermissionHistoryRepository:
    """Append-only permission history."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def record(self, entry: PermissionHistoryEntry) -> PermissionHistoryEntry:
        """Append entry."""
        await self._conn.execute(
            "INSERT INTO permission_history "
            "(id, convention_id, actor_id, change_type, target_user_id, before, after, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.convention_id,
                entry.actor_id,
                entry.change_type.value,
                entry.target_user_id,
                Jsonb(entry.before) if entry.before is not None else None,
                Jsonb(entry.after) if entry.after is not None else None,
                entry.created_at,
            ),
        )
        return entry

    async def list_by_convention(
        self, convention_id: UUID, limit: int = 200
    ) -> list[PermissionHistoryEntry]:
        """List entries of a convention, newest first."""
        cur = await self._conn.execute(
            "SELECT id, convention_id, actor_id, change_type, target_user_id, before, after, created_at "
            "FROM permission_history WHERE convention_id = %s "
            "ORDER BY created_at DESC LIMIT %s",
            (convention_id, limit),
        )
        rows = await cur.fetchall()
        return [
            PermissionHistoryEntry(
                id=r[0],
                convention_id=r[1],
                actor_id=r[2],
                change_type=PermissionChangeType(r[3]),
                target_user_id=r[4],
                before=r[5],
                after=r[6],
                created_at=r[7],
            )
            for r in rows
        ]
