"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from convention_hub.application.ports.repositories import (
    CollaboratorRepository,
    ConventionRepository,
    EditionRepository,
    PermissionHistoryRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def conventions(self) -> ConventionRepository: ...

    @property
    def editions(self) -> EditionRepository: ...

    @property
    def collaborators(self) -> CollaboratorRepository: ...

    @property
    def permission_history(self) -> PermissionHistoryRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
