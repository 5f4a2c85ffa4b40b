"""Delete-or-archive decision for conventions."""

from convention_hub.domain.entities import Convention
from convention_hub.domain.value_objects import DeletionOutcome


def plan_deletion(convention: Convention, edition_count: int) -> DeletionOutcome:
    """Archive when any edition exists, otherwise delete.

    Editions keep historical records (attendees, volunteers) that must outlive
    the convention listing.
    """
    if edition_count > 0:
        return DeletionOutcome.ARCHIVE
    return DeletionOutcome.DELETE
