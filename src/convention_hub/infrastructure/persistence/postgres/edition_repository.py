"""PostgreSQL edition repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from convention_hub.domain.entities import Edition

_COLUMNS = "id, convention_id, creator_id, name, start_date, end_date, created_at, updated_at"


def _row_to_edition(r: tuple) -> Edition:
    return Edition(
        id=r[0],
        convention_id=r[1],
        creator_id=r[2],
        name=r[3],
        start_date=r[4],
        end_date=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresEditionRepository:
    """Edition repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, edition_id: UUID) -> Edition | None:
        """Get edition by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM edition WHERE id = %s",
            (edition_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_edition(r)

    async def count_by_convention(self, convention_id: UUID) -> int:
        """Count editions of a convention."""
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM edition WHERE convention_id = %s",
            (convention_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def create(self, edition: Edition) -> Edition:
        """Create edition."""
        await self._conn.execute(
            f"INSERT INTO edition ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                edition.id,
                edition.convention_id,
                edition.creator_id,
                edition.name,
                edition.start_date,
                edition.end_date,
                edition.created_at,
                edition.updated_at,
            ),
        )
        return edition

    async def update(self, edition: Edition) -> None:
        """Update edition."""
        await self._conn.execute(
            "UPDATE edition SET name=%s, start_date=%s, end_date=%s, updated_at=%s WHERE id=%s",
            (edition.name, edition.start_date, edition.end_date, edition.updated_at, edition.id),
        )

    async def delete(self, edition_id: UUID) -> None:
        """Delete edition."""
        await self._conn.execute(
            "DELETE FROM edition WHERE id = %s",
            (edition_id,),
        )
