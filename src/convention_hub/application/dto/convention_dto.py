"""Convention DTOs."""

from dataclasses import dataclass

from convention_hub.domain.entities import Convention
from convention_hub.domain.value_objects import DeletionOutcome


@dataclass
class ConventionDeletion:
    """Result of a deletion request - the convention is gone or archived."""

    outcome: DeletionOutcome
    convention: Convention
