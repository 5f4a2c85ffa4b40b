"""Capability read endpoints - lets clients show or hide actions."""

from uuid import UUID

import falcon.asgi

from convention_hub.application.ports import PermissionResolver
from convention_hub.domain.value_objects import ResourceRef
from convention_hub.interfaces.api.errors import EXPECTED_ERRORS, error_response
from convention_hub.interfaces.api.resources.serializers import capabilities_to_list


class CapabilitiesResource:
    """GET /v1/conventions/{id}/capabilities and /v1/editions/{id}/capabilities."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    async def _respond(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource: ResourceRef
    ) -> None:
        try:
            capabilities = await self._resolver.resolve(req.context.user, resource)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = {
            "resource": resource.kind.value,
            "id": str(resource.id),
            "capabilities": capabilities_to_list(capabilities),
        }
        resp.status = falcon.HTTP_200

    async def on_get_convention(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, convention_id: str
    ) -> None:
        try:
            resource = ResourceRef.convention(UUID(convention_id))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return
        await self._respond(req, resp, resource)

    async def on_get_edition(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, edition_id: str
    ) -> None:
        try:
            resource = ResourceRef.edition(UUID(edition_id))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid edition ID"}
            return
        await self._respond(req, resp, resource)
