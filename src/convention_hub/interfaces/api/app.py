"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from convention_hub.interfaces.api.errors import handle_unexpected
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


def create_app(
    conventions_resource: ConventionsResource,
    convention_resource: ConventionResource,
    convention_archive_resource: ConventionArchiveResource,
    editions_resource: EditionsResource,
    edition_resource: EditionResource,
    collaborators_resource: CollaboratorsResource,
    collaborator_resource: CollaboratorResource,
    capabilities_resource: CapabilitiesResource,
    history_resource: PermissionHistoryResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/conventions", conventions_resource)
    app.add_route("/v1/conventions/{convention_id}", convention_resource)
    app.add_route("/v1/conventions/{convention_id}/archive", convention_archive_resource)
    app.add_route("/v1/conventions/{convention_id}/editions", editions_resource)
    app.add_route("/v1/editions/{edition_id}", edition_resource)
    app.add_route("/v1/conventions/{convention_id}/collaborators", collaborators_resource)
    app.add_route(
        "/v1/conventions/{convention_id}/collaborators/{collaborator_id}",
        collaborator_resource,
    )
    app.add_route(
        "/v1/conventions/{convention_id}/capabilities",
        capabilities_resource,
        suffix="convention",
    )
    app.add_route(
        "/v1/editions/{edition_id}/capabilities",
        capabilities_resource,
        suffix="edition",
    )
    app.add_route("/v1/conventions/{convention_id}/history", history_resource)
    return app
