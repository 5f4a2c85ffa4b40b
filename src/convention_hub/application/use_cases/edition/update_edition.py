"""Update edition use case."""

from dataclasses import replace
from datetime import UTC, date, datetime
from uuid import UUID

from convention_hub.application.ports import MutationGuard
from convention_hub.application.use_cases.edition.create_edition import check_dates
from convention_hub.domain.entities import Edition, User
from convention_hub.domain.exceptions import NotFound, ValidationError
from convention_hub.domain.value_objects import Capability, ResourceRef

# Dates left at UNSET keep their stored value; an explicit None clears them.
UNSET = object()


class UpdateEditionUseCase:
    """Edit one edition - its creator, per-edition editors or editAllEditions holders."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor: User | None,
        edition_id: UUID,
        name: str | None = None,
        start_date: date | None | object = UNSET,
        end_date: date | None | object = UNSET,
    ) -> Edition:
        await self._guard.require(
            actor, ResourceRef.edition(edition_id), Capability.EDIT_ALL_EDITIONS
        )
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValidationError("Edition name cannot be empty")

        async with self._uow_factory() as uow:
            edition = await uow.editions.get_by_id(edition_id)
            if not edition:
                raise NotFound("Edition", edition_id)
            updated = replace(
                edition,
                name=name.strip() if name is not None else edition.name,
                start_date=edition.start_date if start_date is UNSET else start_date,
                end_date=edition.end_date if end_date is UNSET else end_date,
                updated_at=datetime.now(UTC),
            )
            check_dates(updated.start_date, updated.end_date)
            await uow.editions.update(updated)
        return updated
