"""Delete edition use case."""

import logging
from uuid import UUID

from convention_hub.application.ports import MutationGuard
from convention_hub.domain.entities import User
from convention_hub.domain.exceptions import NotFound
from convention_hub.domain.value_objects import Capability, ResourceRef

logger = logging.getLogger(__name__)


class DeleteEditionUseCase:
    """Delete one edition - its creator, per-edition deleters or deleteAllEditions holders."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(self, actor: User | None, edition_id: UUID) -> None:
        await self._guard.require(
            actor, ResourceRef.edition(edition_id), Capability.DELETE_ALL_EDITIONS
        )

        async with self._uow_factory() as uow:
            edition = await uow.editions.get_by_id(edition_id)
            if not edition:
                raise NotFound("Edition", edition_id)
            await uow.editions.delete(edition_id)

        logger.info("Deleted edition %s (actor %s)", edition_id, actor.id)
