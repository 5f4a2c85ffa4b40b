"""Update convention use case."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from convention_hub.application.ports import MutationGuard
from convention_hub.domain.entities import Convention, User
from convention_hub.domain.exceptions import NotFound, ValidationError
from convention_hub.domain.value_objects import Capability, ResourceRef


class UpdateConventionUseCase:
    """Rename or re-describe a convention. Requires editConvention."""

    def __init__(self, unit_of_work_factory: type, guard: MutationGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor: User | None,
        convention_id: UUID,
        name: str | None = None,
        description: str | None = None,
    ) -> Convention:
        await self._guard.require(
            actor, ResourceRef.convention(convention_id), Capability.EDIT_CONVENTION
        )
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValidationError("Convention name cannot be empty")
        if description is not None and not isinstance(description, str):
            raise ValidationError("Convention description must be text")

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_by_id(convention_id)
            if not convention:
                raise NotFound("Convention", convention_id)
            updated = replace(
                convention,
                name=name.strip() if name is not None else convention.name,
                description=description if description is not None else convention.description,
                updated_at=datetime.now(UTC),
            )
            await uow.conventions.update(updated)
        return updated
