"""List permission history use case."""

from uuid import UUID

from convention_hub.application.ports import PermissionResolver
from convention_hub.domain.entities import PermissionHistoryEntry, User
from convention_hub.domain.exceptions import AuthorizationDenied
from convention_hub.domain.value_objects import ResourceRef


class ListPermissionHistoryUseCase:
    """Read the permission history of a convention, newest first."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: PermissionResolver,
        limit: int = 200,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver
        self._limit = limit

    async def execute(self, actor: User | None, convention_id: UUID) -> list[PermissionHistoryEntry]:
        resource = ResourceRef.convention(convention_id)
        if not await self._resolver.can_view(actor, resource):
            raise AuthorizationDenied(None, resource)

        async with self._uow_factory() as uow:
            return await uow.permission_history.list_by_convention(
                convention_id, limit=self._limit
            )
