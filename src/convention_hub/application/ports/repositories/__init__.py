"""Repository ports."""

from convention_hub.application.ports.repositories.collaborator_repository import (
    CollaboratorRepository,
)
from convention_hub.application.ports.repositories.convention_repository import (
    ConventionRepository,
)
from convention_hub.application.ports.repositories.edition_repository import (
    EditionRepository,
)
from convention_hub.application.ports.repositories.permission_history_repository import (
    PermissionHistoryRepository,
)

__all__ = [
    "CollaboratorRepository",
    "ConventionRepository",
    "EditionRepository",
    "PermissionHistoryRepository",
]
