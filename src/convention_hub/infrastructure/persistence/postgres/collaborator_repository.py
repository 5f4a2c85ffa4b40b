"""PostgreSQL collaborator repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from convention_hub.domain.entities import Collaborator, EditionGrant
from convention_hub.domain.exceptions import Conflict
from convention_hub.domain.value_objects import Capability

# One boolean column per capability.
CAPABILITY_COLUMNS: dict[Capability, str] = {
    Capability.EDIT_CONVENTION: "can_edit_convention",
    Capability.DELETE_CONVENTION: "can_delete_convention",
    Capability.MANAGE_COLLABORATORS: "can_manage_collaborators",
    Capability.ADD_EDITION: "can_add_edition",
    Capability.EDIT_ALL_EDITIONS: "can_edit_all_editions",
    Capability.DELETE_ALL_EDITIONS: "can_delete_all_editions",
}

_FLAG_COLUMNS = ", ".join(CAPABILITY_COLUMNS.values())
_COLUMNS = f"id, convention_id, user_id, title, added_by_id, added_at, {_FLAG_COLUMNS}"


class PostgresCollaboratorRepository:
    """Collaborator repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _to_collaborators(self, rows: list[tuple]) -> list[Collaborator]:
        if not rows:
            return []
        ids = [r[0] for r in rows]
        cur = await self._conn.execute(
            "SELECT collaborator_id, edition_id, can_edit, can_delete "
            "FROM collaborator_edition_permission WHERE collaborator_id = ANY(%s)",
            (ids,),
        )
        grants: dict[UUID, list[EditionGrant]] = {}
        for g in await cur.fetchall():
            grants.setdefault(g[0], []).append(
                EditionGrant(edition_id=g[1], can_edit=g[2], can_delete=g[3])
            )

        collaborators = []
        for r in rows:
            flags = r[6:]
            collaborators.append(
                Collaborator(
                    id=r[0],
                    convention_id=r[1],
                    user_id=r[2],
                    title=r[3],
                    added_by_id=r[4],
                    added_at=r[5],
                    capabilities=frozenset(
                        c for c, flag in zip(CAPABILITY_COLUMNS, flags) if flag
                    ),
                    per_edition=grants.get(r[0], []),
                )
            )
        return collaborators

    async def _fetch_one(self, where: str, params: tuple) -> Collaborator | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collaborator WHERE {where}",
            params,
        )
        r = await cur.fetchone()
        if not r:
            return None
        return (await self._to_collaborators([r]))[0]

    async def get_by_id(self, collaborator_id: UUID) -> Collaborator | None:
        """Get collaborator by id."""
        return await self._fetch_one("id = %s", (collaborator_id,))

    async def get_for_convention(self, convention_id: UUID, user_id: str) -> Collaborator | None:
        """Get the collaborator record of a user on a convention."""
        return await self._fetch_one(
            "convention_id = %s AND user_id = %s", (convention_id, user_id)
        )

    async def list_by_convention(self, convention_id: UUID) -> list[Collaborator]:
        """List collaborators of a convention."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collaborator WHERE convention_id = %s ORDER BY added_at",
            (convention_id,),
        )
        return await self._to_collaborators(await cur.fetchall())

    async def count_by_convention(self, convention_id: UUID) -> int:
        """Count collaborator records of a convention."""
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM collaborator WHERE convention_id = %s",
            (convention_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def create(self, collaborator: Collaborator) -> Collaborator:
        """Create collaborator and its per-edition grants.

        A concurrent grant for the same (convention, user) surfaces as Conflict.
        """
        try:
            await self._conn.execute(
                f"INSERT INTO collaborator ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    collaborator.id,
                    collaborator.convention_id,
                    collaborator.user_id,
                    collaborator.title,
                    collaborator.added_by_id,
                    collaborator.added_at,
                    *(c in collaborator.capabilities for c in CAPABILITY_COLUMNS),
                ),
            )
        except UniqueViolation as e:
            raise Conflict("User is already a collaborator of this convention") from e
        await self._insert_grants(collaborator)
        return collaborator

    async def update(self, collaborator: Collaborator) -> None:
        """Update title, flags and per-edition grants (grants are replaced)."""
        assignments = ", ".join(f"{col}=%s" for col in CAPABILITY_COLUMNS.values())
        await self._conn.execute(
            f"UPDATE collaborator SET title=%s, {assignments} WHERE id=%s",
            (
                collaborator.title,
                *(c in collaborator.capabilities for c in CAPABILITY_COLUMNS),
                collaborator.id,
            ),
        )
        await self._conn.execute(
            "DELETE FROM collaborator_edition_permission WHERE collaborator_id = %s",
            (collaborator.id,),
        )
        await self._insert_grants(collaborator)

    async def delete(self, collaborator_id: UUID) -> None:
        """Delete collaborator; per-edition grants cascade."""
        await self._conn.execute(
            "DELETE FROM collaborator WHERE id = %s",
            (collaborator_id,),
        )

    async def _insert_grants(self, collaborator: Collaborator) -> None:
        for grant in collaborator.per_edition:
            await self._conn.execute(
                "INSERT INTO collaborator_edition_permission "
                "(collaborator_id, edition_id, can_edit, can_delete) VALUES (%s, %s, %s, %s)",
                (collaborator.id, grant.edition_id, grant.can_edit, grant.can_delete),
            )
