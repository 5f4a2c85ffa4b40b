"""Permission resolver implementation - effective capabilities from stored grants."""

import logging
from uuid import UUID

from convention_hub.domain.entities import Collaborator, Convention, Edition, User
from convention_hub.domain.exceptions import InvariantViolation, NotFound, Unauthenticated
from convention_hub.domain.value_objects import (
    ALL_CAPABILITIES,
    NO_CAPABILITIES,
    Capability,
    ResourceKind,
    ResourceRef,
)

logger = logging.getLogger(__name__)

_EDITION_SCOPED = frozenset({Capability.EDIT_ALL_EDITIONS, Capability.DELETE_ALL_EDITIONS})


class ConventionPermissionResolver:
    """Composes global admin, authorship, collaborator grants and edition creatorship.

    Cheap checks (admin flag, id comparisons) run before collaborator lookups.
    The resolver never writes; it is safe to call for UI affordances.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(self, user: User | None, resource: ResourceRef) -> frozenset[Capability]:
        """Return the user's capabilities on a convention or edition."""
        if user is None:
            raise Unauthenticated("No acting user")

        async with self._uow_factory() as uow:
            if resource.kind is ResourceKind.EDITION:
                edition, convention = await self._load_edition(uow, resource.id)
                return await self._edition_capabilities(uow, user, edition, convention)

            convention = await self._load_convention(uow, resource.id)
            capabilities, _ = await self._convention_capabilities(uow, user, convention)
            return capabilities

    async def can_view(self, user: User | None, resource: ResourceRef) -> bool:
        """Any collaborator (even without rights), the author, creator or global admin."""
        if user is None:
            raise Unauthenticated("No acting user")

        async with self._uow_factory() as uow:
            if resource.kind is ResourceKind.EDITION:
                edition, convention = await self._load_edition(uow, resource.id)
                if user.id == edition.creator_id:
                    return True
            else:
                convention = await self._load_convention(uow, resource.id)

            if user.is_global_admin or user.id == convention.author_id:
                return True
            collaborator = await uow.collaborators.get_for_convention(convention.id, user.id)
            return collaborator is not None

    async def _load_convention(self, uow, convention_id: UUID) -> Convention:
        convention = await uow.conventions.get_by_id(convention_id)
        if not convention:
            raise NotFound("Convention", convention_id)
        return convention

    async def _load_edition(self, uow, edition_id: UUID) -> tuple[Edition, Convention]:
        edition = await uow.editions.get_by_id(edition_id)
        if not edition:
            raise NotFound("Edition", edition_id)
        convention = await uow.conventions.get_by_id(edition.convention_id)
        if not convention:
            logger.critical(
                "Edition %s references missing convention %s", edition.id, edition.convention_id
            )
            raise InvariantViolation(f"Edition {edition.id} has no convention")
        return edition, convention

    async def _convention_capabilities(
        self, uow, user: User, convention: Convention
    ) -> tuple[frozenset[Capability], Collaborator | None]:
        if user.is_global_admin:
            return ALL_CAPABILITIES, None
        # Author stays fully capable even if their collaborator row was altered.
        if user.id == convention.author_id:
            return ALL_CAPABILITIES, None

        collaborator = await uow.collaborators.get_for_convention(convention.id, user.id)
        if collaborator:
            return collaborator.capabilities, collaborator

        if await uow.collaborators.count_by_convention(convention.id) == 0:
            logger.critical("Convention %s has no collaborator records", convention.id)
            raise InvariantViolation(f"Convention {convention.id} has no collaborators")
        return NO_CAPABILITIES, None

    async def _edition_capabilities(
        self, uow, user: User, edition: Edition, convention: Convention
    ) -> frozenset[Capability]:
        if user.is_global_admin:
            return ALL_CAPABILITIES

        scoped: set[Capability] = set()
        if user.id == edition.creator_id:
            scoped |= _EDITION_SCOPED

        capabilities, collaborator = await self._convention_capabilities(uow, user, convention)
        if collaborator:
            grant = collaborator.grant_for_edition(edition.id)
            if grant and grant.can_edit:
                scoped.add(Capability.EDIT_ALL_EDITIONS)
            if grant and grant.can_delete:
                scoped.add(Capability.DELETE_ALL_EDITIONS)

        return capabilities | scoped
