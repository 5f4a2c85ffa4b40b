"""Pytest fixtures for Convention Hub tests."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from convention_hub.domain.entities import (
    CREATOR_TITLE,
    Collaborator,
    Convention,
    Edition,
    EditionGrant,
    PermissionHistoryEntry,
    User,
)
from convention_hub.domain.value_objects import ALL_CAPABILITIES, Capability
from convention_hub.infrastructure.permission.mutation_guard import CapabilityGuard
from convention_hub.infrastructure.permission.permission_resolver import (
    ConventionPermissionResolver,
)


# --- Fake repositories ---


class FakeConventionRepository:
    """In-memory convention repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Convention] = {}

    async def get_by_id(self, convention_id: UUID) -> Convention | None:
        return self._by_id.get(convention_id)

    async def get_for_update(self, convention_id: UUID) -> Convention | None:
        return self._by_id.get(convention_id)

    async def create(self, convention: Convention) -> Convention:
        self._by_id[convention.id] = convention
        return convention

    async def update(self, convention: Convention) -> None:
        stored = self._by_id[convention.id]
        self._by_id[convention.id] = replace(
            stored,
            name=convention.name,
            description=convention.description,
            updated_at=convention.updated_at,
        )

    async def set_archived(
        self, convention_id: UUID, archived: bool, at: datetime
    ) -> Convention | None:
        stored = self._by_id.get(convention_id)
        if stored is None or stored.is_archived == archived:
            return None
        updated = replace(
            stored, is_archived=archived, archived_at=at if archived else None, updated_at=at
        )
        self._by_id[convention_id] = updated
        return updated

    async def hard_delete(self, convention_id: UUID) -> None:
        self._by_id.pop(convention_id, None)


class FakeEditionRepository:
    """In-memory edition repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Edition] = {}

    async def get_by_id(self, edition_id: UUID) -> Edition | None:
        return self._by_id.get(edition_id)

    async def count_by_convention(self, convention_id: UUID) -> int:
        return sum(1 for e in self._by_id.values() if e.convention_id == convention_id)

    async def create(self, edition: Edition) -> Edition:
        self._by_id[edition.id] = edition
        return edition

    async def update(self, edition: Edition) -> None:
        self._by_id[edition.id] = edition

    async def delete(self, edition_id: UUID) -> None:
        self._by_id.pop(edition_id, None)


class FakeCollaboratorRepository:
    """In-memory collaborator repository, unique on (convention_id, user_id)."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Collaborator] = {}

    async def get_by_id(self, collaborator_id: UUID) -> Collaborator | None:
        return self._by_id.get(collaborator_id)

    async def get_for_convention(self, convention_id: UUID, user_id: str) -> Collaborator | None:
        for c in self._by_id.values():
            if c.convention_id == convention_id and c.user_id == user_id:
                return c
        return None

    async def list_by_convention(self, convention_id: UUID) -> list[Collaborator]:
        return [c for c in self._by_id.values() if c.convention_id == convention_id]

    async def count_by_convention(self, convention_id: UUID) -> int:
        return len(await self.list_by_convention(convention_id))

    async def create(self, collaborator: Collaborator) -> Collaborator:
        if await self.get_for_convention(collaborator.convention_id, collaborator.user_id):
            raise AssertionError("duplicate (convention_id, user_id)")
        self._by_id[collaborator.id] = collaborator
        return collaborator

    async def update(self, collaborator: Collaborator) -> None:
        self._by_id[collaborator.id] = collaborator

    async def delete(self, collaborator_id: UUID) -> None:
        self._by_id.pop(collaborator_id, None)


class FakePermissionHistoryRepository:
    """In-memory append-only history."""

    def __init__(self) -> None:
        self.entries: list[PermissionHistoryEntry] = []
        self.fail_on_record = False

    async def record(self, entry: PermissionHistoryEntry) -> PermissionHistoryEntry:
        if self.fail_on_record:
            raise RuntimeError("history store unavailable")
        self.entries.append(entry)
        return entry

    async def list_by_convention(
        self, convention_id: UUID, limit: int = 200
    ) -> list[PermissionHistoryEntry]:
        # Newest first; later inserts win ties on created_at.
        items = [e for e in reversed(self.entries) if e.convention_id == convention_id]
        items.sort(key=lambda e: e.created_at, reverse=True)
        return items[:limit]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories.

    Rollback restores the state captured by begin(), so a failed use case
    leaves nothing behind.
    """

    def __init__(self) -> None:
        self.conventions = FakeConventionRepository()
        self.editions = FakeEditionRepository()
        self.collaborators = FakeCollaboratorRepository()
        self.permission_history = FakePermissionHistoryRepository()
        self._saved: dict | None = None
        self.commits = 0
        self.rollbacks = 0

    def _state(self) -> dict:
        return {
            "conventions": self.conventions._by_id,
            "editions": self.editions._by_id,
            "collaborators": self.collaborators._by_id,
            "history": self.permission_history.entries,
        }

    def begin(self) -> None:
        self._saved = copy.deepcopy(self._state())

    async def commit(self) -> None:
        self.commits += 1
        self._saved = None

    async def rollback(self) -> None:
        self.rollbacks += 1
        if self._saved is None:
            return
        self.conventions._by_id = self._saved["conventions"]
        self.editions._by_id = self._saved["editions"]
        self.collaborators._by_id = self._saved["collaborators"]
        self.permission_history.entries = self._saved["history"]
        self._saved = None


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork; commits on exit, rolls back on error."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.begin()
        try:
            yield uow
        except BaseException:
            await uow.rollback()
            raise
        else:
            await uow.commit()

    return _factory


# --- Seed helpers ---


def seed_convention(
    uow: FakeUnitOfWork,
    author_id: str = "author",
    *,
    with_creator: bool = True,
    is_archived: bool = False,
) -> Convention:
    """Store a convention and, by default, the author's Creator collaborator row."""
    now = datetime.now(UTC)
    convention = Convention(
        id=uuid4(),
        author_id=author_id,
        name="Test Con",
        created_at=now,
        updated_at=now,
        is_archived=is_archived,
        archived_at=now if is_archived else None,
    )
    uow.conventions._by_id[convention.id] = convention
    if with_creator:
        seed_collaborator(uow, convention, author_id, ALL_CAPABILITIES, title=CREATOR_TITLE)
    return convention


def seed_collaborator(
    uow: FakeUnitOfWork,
    convention: Convention,
    user_id: str,
    capabilities: frozenset[Capability] | set[Capability] = frozenset(),
    *,
    title: str | None = None,
    per_edition: list[EditionGrant] | None = None,
) -> Collaborator:
    collaborator = Collaborator(
        id=uuid4(),
        convention_id=convention.id,
        user_id=user_id,
        capabilities=frozenset(capabilities),
        added_at=datetime.now(UTC),
        title=title,
        added_by_id=convention.author_id,
        per_edition=per_edition or [],
    )
    uow.collaborators._by_id[collaborator.id] = collaborator
    return collaborator


def seed_edition(
    uow: FakeUnitOfWork, convention: Convention, creator_id: str = "author"
) -> Edition:
    now = datetime.now(UTC)
    edition = Edition(
        id=uuid4(),
        convention_id=convention.id,
        creator_id=creator_id,
        name="2026",
        created_at=now,
        updated_at=now,
    )
    uow.editions._by_id[edition.id] = edition
    return edition


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory sharing fake_uow across calls so state persists within a test."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def resolver(uow_factory) -> ConventionPermissionResolver:
    return ConventionPermissionResolver(uow_factory)


@pytest.fixture
def guard(resolver) -> CapabilityGuard:
    return CapabilityGuard(resolver)


@pytest.fixture
def author() -> User:
    return User(id="author")


@pytest.fixture
def global_admin() -> User:
    return User(id="root", is_global_admin=True)
