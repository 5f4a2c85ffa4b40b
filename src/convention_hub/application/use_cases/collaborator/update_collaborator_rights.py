"""Update collaborator rights use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from convention_hub.application.ports import MutationGuard
from convention_hub.application.use_cases.collaborator.rights import (
    apply_rights,
    validate_edition_grants,
)
from convention_hub.domain.entities import Collaborator, EditionGrant, PermissionHistoryEntry, User
from convention_hub.domain.exceptions import Conflict, NotFound
from convention_hub.domain.value_objects import (
    Capability,
    CollaboratorRole,
    PermissionChangeType,
    ResourceRef,
)

logger = logging.getLogger(__name__)


class UpdateCollaboratorRightsUseCase:
    """Change title, capability flags or per-edition grants of a collaborator."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor: User | None,
        convention_id: UUID,
        collaborator_id: UUID,
        role: CollaboratorRole | None = None,
        rights: dict[Capability, bool] | None = None,
        title: str | None = None,
        per_edition: list[EditionGrant] | None = None,
    ) -> Collaborator:
        """Apply the change and record it once. A no-op change records nothing.

        role re-applies a template before rights overrides; per_edition, when
        given, replaces every existing per-edition grant; an empty title clears it.
        """
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.MANAGE_COLLABORATORS
        )

        async with self._uow_factory() as uow:
            collaborator = await uow.collaborators.get_by_id(collaborator_id)
            if not collaborator or collaborator.convention_id != convention_id:
                raise NotFound("Collaborator", collaborator_id)
            convention = await uow.conventions.get_by_id(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)

            base = role.capabilities if role else collaborator.capabilities
            grants = collaborator.per_edition
            if per_edition is not None:
                grants = await validate_edition_grants(uow, convention_id, per_edition)

            updated = replace(
                collaborator,
                capabilities=apply_rights(base, rights),
                title=collaborator.title if title is None else (title.strip() or None),
                per_edition=grants,
            )
            if collaborator.user_id == convention.author_id and not updated.has_full_capabilities:
                raise Conflict("The author's rights cannot be reduced")

            before, after = collaborator.snapshot(), updated.snapshot()
            if before == after:
                return collaborator

            await uow.collaborators.update(updated)
            only_editions = before["rights"] == after["rights"] and before["title"] == after["title"]
            if role:
                after["role"] = role.value
            await uow.permission_history.record(
                PermissionHistoryEntry(
                    id=uuid4(),
                    convention_id=convention_id,
                    actor_id=actor.id,
                    change_type=(
                        PermissionChangeType.PER_EDITIONS_UPDATED
                        if only_editions
                        else PermissionChangeType.ROLE_CHANGED
                    ),
                    target_user_id=collaborator.user_id,
                    before=before,
                    after=after,
                    created_at=datetime.now(UTC),
                )
            )

        logger.info(
            "Updated rights of %s on convention %s (actor %s)",
            collaborator.user_id,
            convention_id,
            actor.id,
        )
        return updated
