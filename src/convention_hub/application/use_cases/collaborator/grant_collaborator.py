"""Grant collaborator use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from convention_hub.application.ports import MutationGuard
from convention_hub.application.use_cases.collaborator.rights import (
    apply_rights,
    validate_edition_grants,
)
from convention_hub.domain.entities import Collaborator, EditionGrant, PermissionHistoryEntry, User
from convention_hub.domain.exceptions import Conflict, NotFound, ValidationError
from convention_hub.domain.value_objects import (
    NO_CAPABILITIES,
    Capability,
    CollaboratorRole,
    PermissionChangeType,
    ResourceRef,
)

logger = logging.getLogger(__name__)


class GrantCollaboratorUseCase:
    """Add a user as collaborator on a convention."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor: User | None,
        convention_id: UUID,
        user_id: str,
        role: CollaboratorRole | None = None,
        rights: dict[Capability, bool] | None = None,
        title: str | None = None,
        per_edition: list[EditionGrant] | None = None,
    ) -> Collaborator:
        """Actor must hold manageCollaborators.

        The role pre-fills the flags; individual rights override them. Without
        a role the collaborator starts with no capabilities.
        """
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.MANAGE_COLLABORATORS
        )
        user_id = (user_id or "").strip()
        if not user_id:
            raise ValidationError("user_id is required")

        base = role.capabilities if role else NO_CAPABILITIES
        now = datetime.now(UTC)

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_by_id(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)

            existing = await uow.collaborators.get_for_convention(convention_id, user_id)
            if existing:
                raise Conflict("User is already a collaborator of this convention")

            grants = await validate_edition_grants(uow, convention_id, per_edition or [])
            collaborator = Collaborator(
                id=uuid4(),
                convention_id=convention_id,
                user_id=user_id,
                capabilities=apply_rights(base, rights),
                title=(title or "").strip() or None,
                added_by_id=actor.id,
                added_at=now,
                per_edition=grants,
            )
            await uow.collaborators.create(collaborator)

            after = collaborator.snapshot()
            if role:
                after["role"] = role.value
            await uow.permission_history.record(
                PermissionHistoryEntry(
                    id=uuid4(),
                    convention_id=convention_id,
                    actor_id=actor.id,
                    change_type=PermissionChangeType.GRANTED,
                    target_user_id=user_id,
                    after=after,
                    created_at=now,
                )
            )

        logger.info(
            "Granted %s on convention %s to %s (actor %s)",
            sorted(collaborator.capabilities),
            convention_id,
            user_id,
            actor.id,
        )
        return collaborator
