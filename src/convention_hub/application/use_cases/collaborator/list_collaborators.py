"""List collaborators use case."""

from uuid import UUID

from convention_hub.application.ports import PermissionResolver
from convention_hub.domain.entities import Collaborator, User
from convention_hub.domain.exceptions import AuthorizationDenied
from convention_hub.domain.value_objects import ResourceRef


class ListCollaboratorsUseCase:
    """List collaborators of a convention. Any collaborator may look."""

    def __init__(self, unit_of_work_factory: type, resolver: PermissionResolver) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    async def execute(self, actor: User | None, convention_id: UUID) -> list[Collaborator]:
        resource = ResourceRef.convention(convention_id)
        if not await self._resolver.can_view(actor, resource):
            raise AuthorizationDenied(None, resource)

        async with self._uow_factory() as uow:
            collaborators = await uow.collaborators.list_by_convention(convention_id)
        return sorted(collaborators, key=lambda c: c.added_at)
