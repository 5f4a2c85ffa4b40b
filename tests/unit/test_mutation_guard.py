"""Mutation guard tests."""

import pytest

from convention_hub.domain.entities import User
from convention_hub.domain.exceptions import AuthorizationDenied, Unauthenticated
from convention_hub.domain.value_objects import Capability, CollaboratorRole, ResourceRef

from tests.conftest import seed_collaborator, seed_convention


@pytest.mark.asyncio
async def test_author_allowed_stranger_denied(fake_uow, resolver, guard) -> None:
    """U1 creates C; U2 without a grant may not edit it."""
    convention = seed_convention(fake_uow, "u1")
    ref = ResourceRef.convention(convention.id)

    assert Capability.DELETE_CONVENTION in await resolver.resolve(User(id="u1"), ref)
    assert await resolver.resolve(User(id="u2"), ref) == frozenset()
    with pytest.raises(AuthorizationDenied) as exc_info:
        await guard.require(User(id="u2"), ref, Capability.EDIT_CONVENTION)
    assert exc_info.value.capability is Capability.EDIT_CONVENTION
    assert exc_info.value.resource == ref


@pytest.mark.asyncio
async def test_evaluate_returns_verdict(fake_uow, guard) -> None:
    convention = seed_convention(fake_uow)
    seed_collaborator(fake_uow, convention, "mod", CollaboratorRole.MODERATOR.capabilities)
    ref = ResourceRef.convention(convention.id)
    mod = User(id="mod")

    allowed = await guard.evaluate(mod, ref, Capability.ADD_EDITION)
    assert allowed.allowed
    assert allowed.reason == "capability granted"

    denied = await guard.evaluate(mod, ref, Capability.MANAGE_COLLABORATORS)
    assert not denied.allowed
    assert denied.capability is Capability.MANAGE_COLLABORATORS
    assert "manageCollaborators" in denied.reason


@pytest.mark.asyncio
async def test_require_passes_when_held(fake_uow, guard, author) -> None:
    convention = seed_convention(fake_uow, author.id)
    await guard.require(
        author, ResourceRef.convention(convention.id), Capability.MANAGE_COLLABORATORS
    )


@pytest.mark.asyncio
async def test_require_without_user_is_unauthenticated(fake_uow, guard) -> None:
    convention = seed_convention(fake_uow)
    with pytest.raises(Unauthenticated):
        await guard.require(None, ResourceRef.convention(convention.id), Capability.EDIT_CONVENTION)
