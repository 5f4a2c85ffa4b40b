"""Archive / unarchive convention use case."""

from uuid import UUID

from convention_hub.application.ports import MutationGuard
from convention_hub.application.use_cases.convention.archival import (
    archive_convention,
    unarchive_convention,
)
from convention_hub.domain.entities import Convention, User
from convention_hub.domain.exceptions import NotFound
from convention_hub.domain.value_objects import Capability, ResourceRef


class SetConventionArchivedUseCase:
    """Explicitly archive or restore a convention. Same right as deletion."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(self, actor: User | None, convention_id: UUID, archived: bool) -> Convention:
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.DELETE_CONVENTION
        )

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_for_update(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)
            if archived:
                return await archive_convention(uow, convention, actor.id)
            return await unarchive_convention(uow, convention, actor.id)
