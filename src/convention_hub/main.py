"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from convention_hub import __version__
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
from convention_hub.config import Settings, get_settings
from convention_hub.infrastructure.auth.keycloak_provider import KeycloakProvider
from convention_hub.infrastructure.permission.mutation_guard import CapabilityGuard
from convention_hub.infrastructure.permission.permission_resolver import (
    ConventionPermissionResolver,
)
from convention_hub.infrastructure.persistence.postgres.connection import create_pool
from convention_hub.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from convention_hub.interfaces.api.app import create_app
from convention_hub.interfaces.api.middleware.auth import AuthMiddleware
from convention_hub.interfaces.api.middleware.cors import CORSMiddleware
from convention_hub.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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

logger = logging.getLogger(__name__)


def create_convention_hub_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; every request is unauthenticated")

    resolver = ConventionPermissionResolver(uow_factory)
    guard = CapabilityGuard(resolver)

    create_convention = CreateConventionUseCase(unit_of_work_factory=uow_factory)
    update_convention = UpdateConventionUseCase(unit_of_work_factory=uow_factory, guard=guard)
    delete_convention = DeleteConventionUseCase(unit_of_work_factory=uow_factory, guard=guard)
    set_archived = SetConventionArchivedUseCase(unit_of_work_factory=uow_factory, guard=guard)
    create_edition = CreateEditionUseCase(unit_of_work_factory=uow_factory, guard=guard)
    update_edition = UpdateEditionUseCase(unit_of_work_factory=uow_factory, guard=guard)
    delete_edition = DeleteEditionUseCase(unit_of_work_factory=uow_factory, guard=guard)
    list_collaborators = ListCollaboratorsUseCase(
        unit_of_work_factory=uow_factory, resolver=resolver
    )
    grant_collaborator = GrantCollaboratorUseCase(unit_of_work_factory=uow_factory, guard=guard)
    update_rights = UpdateCollaboratorRightsUseCase(unit_of_work_factory=uow_factory, guard=guard)
    revoke_collaborator = RevokeCollaboratorUseCase(unit_of_work_factory=uow_factory, guard=guard)
    list_history = ListPermissionHistoryUseCase(
        unit_of_work_factory=uow_factory,
        resolver=resolver,
        limit=settings.history_limit,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        conventions_resource=ConventionsResource(create_convention),
        convention_resource=ConventionResource(uow_factory, update_convention, delete_convention),
        convention_archive_resource=ConventionArchiveResource(set_archived),
        editions_resource=EditionsResource(create_edition),
        edition_resource=EditionResource(update_edition, delete_edition),
        collaborators_resource=CollaboratorsResource(list_collaborators, grant_collaborator),
        collaborator_resource=CollaboratorResource(update_rights, revoke_collaborator),
        capabilities_resource=CapabilitiesResource(resolver),
        history_resource=PermissionHistoryResource(list_history),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, global_admin_role=settings.global_admin_role),
        ],
    )


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Convention Hub v%s starting (%s)", __version__, settings.environment)
    app = create_convention_hub_app(settings)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    run_server()


if __name__ == "__main__":
    main()
