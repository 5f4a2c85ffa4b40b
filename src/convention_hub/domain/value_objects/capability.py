"""Capabilities a collaborator can hold on a convention."""

from enum import StrEnum


class Capability(StrEnum):
    """Discrete rights on a convention and its editions.

    On an edition target, EDIT_ALL_EDITIONS and DELETE_ALL_EDITIONS read as
    "may edit / delete this edition".
    """

    EDIT_CONVENTION = "editConvention"
    DELETE_CONVENTION = "deleteConvention"
    MANAGE_COLLABORATORS = "manageCollaborators"
    ADD_EDITION = "addEdition"
    EDIT_ALL_EDITIONS = "editAllEditions"
    DELETE_ALL_EDITIONS = "deleteAllEditions"


ALL_CAPABILITIES: frozenset[Capability] = frozenset(Capability)
NO_CAPABILITIES: frozenset[Capability] = frozenset()


def parse_capabilities(values: dict[str, bool]) -> dict[Capability, bool]:
    """Parse a ``{"editConvention": true, ...}`` mapping, rejecting unknown keys."""
    parsed: dict[Capability, bool] = {}
    for key, flag in values.items():
        try:
            capability = Capability(key)
        except ValueError:
            raise ValueError(f"Unknown capability: {key}") from None
        parsed[capability] = bool(flag)
    return parsed
