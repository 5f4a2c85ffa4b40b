"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from convention_hub.application.use_cases.collaborator.grant_collaborator import (
    GrantCollaboratorUseCase,
)
from convention_hub.application.use_cases.collaborator.list_collaborators import (
    ListCollaboratorsUseCase,
)
from convention_hub.application.use_cases.collaborator.revoke_collaborator import (
    RevokeCollaboratorUseCase,
)
from convention_hub.application.use_cases.collaborator.update_collaborator_rights import (
    UpdateCollaboratorRightsUseCase,
)
from convention_hub.application.use_cases.convention.create_convention import (
    CreateConventionUseCase,
)
from convention_hub.application.use_cases.convention.delete_convention import (
    DeleteConventionUseCase,
)
from convention_hub.application.use_cases.convention.set_archived import (
    SetConventionArchivedUseCase,
)
from convention_hub.application.use_cases.convention.update_convention import (
    UpdateConventionUseCase,
)
from convention_hub.application.use_cases.edition.create_edition import CreateEditionUseCase
from convention_hub.application.use_cases.edition.delete_edition import DeleteEditionUseCase
from convention_hub.application.use_cases.edition.update_edition import UpdateEditionUseCase
from convention_hub.application.use_cases.history.list_permission_history import (
    ListPermissionHistoryUseCase,
)
from convention_hub.domain.entities import User
from convention_hub.interfaces.api.app import create_app
from convention_hub.interfaces.api.resources.capabilities import CapabilitiesResource
from convention_hub.interfaces.api.resources.collaborators import (
    CollaboratorResource,
    CollaboratorsResource,
)
from convention_hub.interfaces.api.resources.conventions import (
    ConventionArchiveResource,
    ConventionResource,
    ConventionsResource,
)
from convention_hub.interfaces.api.resources.editions import EditionResource, EditionsResource
from convention_hub.interfaces.api.resources.health import HealthResource
from convention_hub.interfaces.api.resources.history import PermissionHistoryResource


class AuthBypassMiddleware:
    """Sets context.user from X-Test-User; X-Test-Admin marks a global admin."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = (
            User(id=user_id, is_global_admin=req.get_header("X-Test-Admin") == "1")
            if user_id
            else None
        )


@pytest.fixture
def app(uow_factory, resolver, guard):
    """Falcon ASGI app wired like the composition root, over in-memory storage."""
    deps = {"unit_of_work_factory": uow_factory, "guard": guard}
    return create_app(
        conventions_resource=ConventionsResource(CreateConventionUseCase(uow_factory)),
        convention_resource=ConventionResource(
            uow_factory, UpdateConventionUseCase(**deps), DeleteConventionUseCase(**deps)
        ),
        convention_archive_resource=ConventionArchiveResource(
            SetConventionArchivedUseCase(**deps)
        ),
        editions_resource=EditionsResource(CreateEditionUseCase(**deps)),
        edition_resource=EditionResource(UpdateEditionUseCase(**deps), DeleteEditionUseCase(**deps)),
        collaborators_resource=CollaboratorsResource(
            ListCollaboratorsUseCase(uow_factory, resolver), GrantCollaboratorUseCase(**deps)
        ),
        collaborator_resource=CollaboratorResource(
            UpdateCollaboratorRightsUseCase(**deps), RevokeCollaboratorUseCase(**deps)
        ),
        capabilities_resource=CapabilitiesResource(resolver),
        history_resource=PermissionHistoryResource(
            ListPermissionHistoryUseCase(uow_factory, resolver)
        ),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
