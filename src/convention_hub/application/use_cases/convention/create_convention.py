"""Create convention use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from convention_hub.domain.entities import (
    CREATOR_TITLE,
    Collaborator,
    Convention,
    PermissionHistoryEntry,
    User,
)
from convention_hub.domain.exceptions import Unauthenticated, ValidationError
from convention_hub.domain.value_objects import CollaboratorRole, PermissionChangeType

logger = logging.getLogger(__name__)


class CreateConventionUseCase:
    """Create convention and grant its author the full administrator set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        user: User | None,
        name: str,
        description: str | None = None,
    ) -> Convention:
        """Convention, creator grant and ledger entry commit together or not at all."""
        if user is None:
            raise Unauthenticated("No acting user")
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValidationError("Convention name is required")

        now = datetime.now(UTC)
        convention = Convention(
            id=uuid4(),
            author_id=user.id,
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        creator = Collaborator(
            id=uuid4(),
            convention_id=convention.id,
            user_id=user.id,
            capabilities=CollaboratorRole.ADMINISTRATOR.capabilities,
            title=CREATOR_TITLE,
            added_by_id=user.id,
            added_at=now,
        )

        async with self._uow_factory() as uow:
            await uow.conventions.create(convention)
            await uow.collaborators.create(creator)
            await uow.permission_history.record(
                PermissionHistoryEntry(
                    id=uuid4(),
                    convention_id=convention.id,
                    actor_id=user.id,
                    change_type=PermissionChangeType.GRANTED,
                    target_user_id=user.id,
                    after={**creator.snapshot(), "role": CollaboratorRole.ADMINISTRATOR.value},
                    created_at=now,
                )
            )

        logger.info("Created convention %s for author %s", convention.id, user.id)
        return convention
