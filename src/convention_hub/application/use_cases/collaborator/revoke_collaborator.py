"""Revoke collaborator use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from convention_hub.application.ports import MutationGuard
from convention_hub.domain.entities import PermissionHistoryEntry, User
from convention_hub.domain.exceptions import Conflict, NotFound
from convention_hub.domain.value_objects import Capability, PermissionChangeType, ResourceRef

logger = logging.getLogger(__name__)


class RevokeCollaboratorUseCase:
    """Remove a collaborator from a convention."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(self, actor: User | None, convention_id: UUID, collaborator_id: UUID) -> None:
        """Actor must hold manageCollaborators; neither self nor the author can be removed."""
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.MANAGE_COLLABORATORS
        )

        async with self._uow_factory() as uow:
            collaborator = await uow.collaborators.get_by_id(collaborator_id)
            if not collaborator or collaborator.convention_id != convention_id:
                raise NotFound("Collaborator", collaborator_id)
            if collaborator.user_id == actor.id:
                raise Conflict("You cannot remove yourself from the collaborators")
            convention = await uow.conventions.get_by_id(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)
            if collaborator.user_id == convention.author_id:
                raise Conflict("The author cannot be removed from the collaborators")

            now = datetime.now(UTC)
            # Recorded before the delete so the snapshot outlives the row.
            await uow.permission_history.record(
                PermissionHistoryEntry(
                    id=uuid4(),
                    convention_id=convention_id,
                    actor_id=actor.id,
                    change_type=PermissionChangeType.REVOKED,
                    target_user_id=collaborator.user_id,
                    before=collaborator.snapshot(),
                    after={"removed": True, "removedAt": now.isoformat()},
                    created_at=now,
                )
            )
            await uow.collaborators.delete(collaborator.id)

        logger.info(
            "Revoked %s from convention %s (actor %s)",
            collaborator.user_id,
            convention_id,
            actor.id,
        )
