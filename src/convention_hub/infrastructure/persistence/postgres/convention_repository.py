"""PostgreSQL convention repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import ForeignKeyViolation

from convention_hub.domain.entities import Convention
from convention_hub.domain.exceptions import Conflict

_COLUMNS = "id, author_id, name, description, created_at, updated_at, is_archived, archived_at"


def _row_to_convention(r: tuple) -> Convention:
    return Convention(
        id=r[0],
        author_id=r[1],
        name=r[2],
        description=r[3],
        created_at=r[4],
        updated_at=r[5],
        is_archived=r[6],
        archived_at=r[7],
    )


class PostgresConventionRepository:
    """Convention repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, convention_id: UUID) -> Convention | None:
        """Get convention by id, archived or not."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM convention WHERE id = %s",
            (convention_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_convention(r)

    async def get_for_update(self, convention_id: UUID) -> Convention | None:
        """Get convention and lock its row until the transaction ends.

        Edition inserts take a key-share lock on the row, so they wait too.
        """
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM convention WHERE id = %s FOR UPDATE",
            (convention_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_convention(r)

    async def create(self, convention: Convention) -> Convention:
        """Create convention."""
        await self._conn.execute(
            f"INSERT INTO convention ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                convention.id,
                convention.author_id,
                convention.name,
                convention.description,
                convention.created_at,
                convention.updated_at,
                convention.is_archived,
                convention.archived_at,
            ),
        )
        return convention

    async def update(self, convention: Convention) -> None:
        """Update name and description. Archive state goes through set_archived."""
        await self._conn.execute(
            "UPDATE convention SET name=%s, description=%s, updated_at=%s WHERE id=%s",
            (convention.name, convention.description, convention.updated_at, convention.id),
        )

    async def set_archived(
        self, convention_id: UUID, archived: bool, at: datetime
    ) -> Convention | None:
        """Flip the archive flag only if it differs; None when nothing changed."""
        cur = await self._conn.execute(
            "UPDATE convention SET is_archived=%s, archived_at=%s, updated_at=%s "
            f"WHERE id=%s AND is_archived <> %s RETURNING {_COLUMNS}",
            (archived, at if archived else None, at, convention_id, archived),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_convention(r)

    async def hard_delete(self, convention_id: UUID) -> None:
        """Hard delete convention; collaborator rows cascade."""
        try:
            await self._conn.execute(
                "DELETE FROM convention WHERE id = %s",
                (convention_id,),
            )
        except ForeignKeyViolation as e:
            raise Conflict("Convention gained an edition and can no longer be deleted") from e
