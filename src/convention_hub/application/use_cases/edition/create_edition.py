"""Create edition use case."""

import logging
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from convention_hub.application.ports import MutationGuard
from convention_hub.domain.entities import Edition, User
from convention_hub.domain.exceptions import Conflict, NotFound, ValidationError
from convention_hub.domain.value_objects import Capability, ResourceRef

logger = logging.getLogger(__name__)


def check_dates(start_date: date | None, end_date: date | None) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValidationError("end_date must not be before start_date")


class CreateEditionUseCase:
    """Add an edition to a convention. Requires addEdition."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor: User | None,
        convention_id: UUID,
        name: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Edition:
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.ADD_EDITION
        )
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValidationError("Edition name is required")
        check_dates(start_date, end_date)

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_for_update(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)
            if convention.is_archived:
                raise Conflict("Convention is archived: editions cannot be added")

            now = datetime.now(UTC)
            edition = Edition(
                id=uuid4(),
                convention_id=convention_id,
                creator_id=actor.id,
                name=name,
                start_date=start_date,
                end_date=end_date,
                created_at=now,
                updated_at=now,
            )
            await uow.editions.create(edition)

        logger.info("Created edition %s in convention %s", edition.id, convention_id)
        return edition
