"""Edition API resources."""

from datetime import date
from uuid import UUID

import falcon.asgi

from convention_hub.application.use_cases.edition.create_edition import CreateEditionUseCase
from convention_hub.application.use_cases.edition.delete_edition import DeleteEditionUseCase
from convention_hub.application.use_cases.edition.update_edition import (
    UNSET,
    UpdateEditionUseCase,
)
from convention_hub.interfaces.api.errors import EXPECTED_ERRORS, error_response
from convention_hub.interfaces.api.resources.request_body import (
    optional_str,
    require_object,
    required_str,
)
from convention_hub.interfaces.api.resources.serializers import edition_to_dict


def _parse_date(body: dict, key: str) -> date | None:
    value = optional_str(body, key)
    return date.fromisoformat(value) if value else None


class EditionsResource:
    """POST /v1/conventions/{id}/editions - add an edition."""

    def __init__(self, create_edition: CreateEditionUseCase) -> None:
        self._create = create_edition

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """Create edition. Requires addEdition on the convention."""
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        try:
            body = require_object(await req.get_media())
            name = required_str(body, "name")
            start_date = _parse_date(body, "start_date")
            end_date = _parse_date(body, "end_date")
        except (KeyError, ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            edition = await self._create.execute(
                req.context.user, conv_id, name, start_date=start_date, end_date=end_date
            )
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = edition_to_dict(edition)
        resp.status = falcon.HTTP_201


class EditionResource:
    """PATCH/DELETE /v1/editions/{id}."""

    def __init__(
        self,
        update_edition: UpdateEditionUseCase,
        delete_edition: DeleteEditionUseCase,
    ) -> None:
        self._update = update_edition
        self._delete = delete_edition

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        edition_id: str,
    ) -> None:
        try:
            ed_id = UUID(edition_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid edition ID"}
            return

        try:
            body = require_object(await req.get_media(default_when_empty={}))
            name = optional_str(body, "name")
            # A date key sent as null clears the stored date; an absent key keeps it.
            dates = {key: _parse_date(body, key) for key in ("start_date", "end_date") if key in body}
        except (ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            edition = await self._update.execute(
                req.context.user,
                ed_id,
                name=name,
                start_date=dates.get("start_date", UNSET),
                end_date=dates.get("end_date", UNSET),
            )
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = edition_to_dict(edition)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        edition_id: str,
    ) -> None:
        try:
            ed_id = UUID(edition_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid edition ID"}
            return

        try:
            await self._delete.execute(req.context.user, ed_id)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.status = falcon.HTTP_204
