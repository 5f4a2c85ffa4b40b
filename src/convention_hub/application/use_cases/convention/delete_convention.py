"""Delete convention use case - hard delete or archive."""

import logging
from uuid import UUID

from convention_hub.application.dto.convention_dto import ConventionDeletion
from convention_hub.application.ports import MutationGuard
from convention_hub.application.use_cases.convention.archival import archive_convention
from convention_hub.domain.deletion_policy import plan_deletion
from convention_hub.domain.entities import User
from convention_hub.domain.exceptions import NotFound
from convention_hub.domain.value_objects import Capability, DeletionOutcome, ResourceRef

logger = logging.getLogger(__name__)


class DeleteConventionUseCase:
    """Delete a convention without editions; archive one that has editions."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(self, actor: User | None, convention_id: UUID) -> ConventionDeletion:
        """Actor must hold deleteConvention."""
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.DELETE_CONVENTION
        )

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_for_update(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)

            edition_count = await uow.editions.count_by_convention(convention_id)
            outcome = plan_deletion(convention, edition_count)
            if outcome is DeletionOutcome.ARCHIVE:
                convention = await archive_convention(uow, convention, actor.id)
            else:
                await uow.conventions.hard_delete(convention_id)
                logger.info("Deleted convention %s (actor %s)", convention_id, actor.id)

        return ConventionDeletion(outcome=outcome, convention=convention)
