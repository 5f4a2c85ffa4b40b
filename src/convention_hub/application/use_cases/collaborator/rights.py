"""Capability and per-edition helpers shared by collaborator use cases."""

from uuid import UUID

from convention_hub.domain.entities import EditionGrant
from convention_hub.domain.exceptions import ValidationError
from convention_hub.domain.value_objects import Capability


def apply_rights(
    base: frozenset[Capability], rights: dict[Capability, bool] | None
) -> frozenset[Capability]:
    """Overlay individual capability flags on a base set."""
    if not rights:
        return base
    granted = {c for c, flag in rights.items() if flag}
    revoked = {c for c, flag in rights.items() if not flag}
    return frozenset((base | granted) - revoked)


async def validate_edition_grants(
    uow, convention_id: UUID, grants: list[EditionGrant]
) -> list[EditionGrant]:
    """Keep one grant per edition, drop empty ones, reject editions of other conventions."""
    by_edition: dict[UUID, EditionGrant] = {}
    for grant in grants:
        edition = await uow.editions.get_by_id(grant.edition_id)
        if not edition or edition.convention_id != convention_id:
            raise ValidationError(f"Edition {grant.edition_id} does not belong to convention")
        by_edition[grant.edition_id] = grant
    return [g for g in by_edition.values() if g.can_edit or g.can_delete]
