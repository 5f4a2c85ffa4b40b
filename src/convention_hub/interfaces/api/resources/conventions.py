"""Convention API resources."""

from uuid import UUID

import falcon.asgi

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
from convention_hub.interfaces.api.errors import EXPECTED_ERRORS, error_response
from convention_hub.interfaces.api.resources.request_body import (
    optional_str,
    require_object,
    required_str,
)
from convention_hub.interfaces.api.resources.serializers import convention_to_dict


class ConventionsResource:
    """POST /v1/conventions - create convention."""

    def __init__(self, create_convention: CreateConventionUseCase) -> None:
        self._create = create_convention

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create convention; the caller becomes its author and first administrator."""
        try:
            body = require_object(await req.get_media())
            name = required_str(body, "name")
            description = optional_str(body, "description")
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            convention = await self._create.execute(req.context.user, name, description)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = convention_to_dict(convention)
        resp.status = falcon.HTTP_201


class ConventionResource:
    """GET/PATCH/DELETE /v1/conventions/{id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_convention: UpdateConventionUseCase,
        delete_convention: DeleteConventionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update = update_convention
        self._delete = delete_convention

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """Get convention by id."""
        if not req.context.user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        async with self._uow_factory() as uow:
            convention = await uow.conventions.get_by_id(conv_id)
        if not convention:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Convention not found"}
            return

        resp.media = convention_to_dict(convention)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """Update name / description. Requires editConvention."""
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        try:
            body = require_object(await req.get_media(default_when_empty={}))
            name = optional_str(body, "name")
            description = optional_str(body, "description")
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            convention = await self._update.execute(
                req.context.user, conv_id, name=name, description=description
            )
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = convention_to_dict(convention)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """Delete convention, or archive it when it has editions."""
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        try:
            result = await self._delete.execute(req.context.user, conv_id)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = {
            "outcome": result.outcome.value,
            "convention": convention_to_dict(result.convention),
        }
        resp.status = falcon.HTTP_200


class ConventionArchiveResource:
    """POST /v1/conventions/{id}/archive - archive or restore."""

    def __init__(self, set_archived: SetConventionArchivedUseCase) -> None:
        self._set_archived = set_archived

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        body = await req.get_media(default_when_empty={})
        archived = body.get("archived", True) if isinstance(body, dict) else None
        if not isinstance(archived, bool):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "archived must be a boolean"}
            return

        try:
            convention = await self._set_archived.execute(req.context.user, conv_id, archived)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = convention_to_dict(convention)
        resp.status = falcon.HTTP_200
