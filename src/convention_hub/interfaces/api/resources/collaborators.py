"""Collaborator API resources."""

from typing import Any
from uuid import UUID

import falcon.asgi

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
from convention_hub.domain.entities import EditionGrant
from convention_hub.domain.value_objects import CollaboratorRole, parse_capabilities
from convention_hub.interfaces.api.errors import EXPECTED_ERRORS, error_response
from convention_hub.interfaces.api.resources.request_body import (
    optional_list,
    optional_object,
    optional_str,
    parse_uuid,
    require_object,
    required_str,
)
from convention_hub.interfaces.api.resources.serializers import collaborator_to_dict


def _parse_rights_fields(body: dict[str, Any]) -> dict[str, Any]:
    """Role, rights, title and per_edition from a request body.

    Raises KeyError / ValueError / TypeError on malformed input.
    """
    role_name = optional_str(body, "role")
    rights = optional_object(body, "rights")
    per_edition = None
    if "per_edition" in body:
        per_edition = []
        for p in optional_list(body, "per_edition") or []:
            p = require_object(p)
            per_edition.append(
                EditionGrant(
                    edition_id=parse_uuid(p.get("edition_id"), "edition_id"),
                    can_edit=bool(p.get("can_edit", False)),
                    can_delete=bool(p.get("can_delete", False)),
                )
            )
    return {
        "role": CollaboratorRole(role_name) if role_name else None,
        "rights": parse_capabilities(rights) if rights else None,
        "title": optional_str(body, "title"),
        "per_edition": per_edition,
    }


class CollaboratorsResource:
    """GET/POST /v1/conventions/{id}/collaborators - list and grant."""

    def __init__(
        self,
        list_collaborators: ListCollaboratorsUseCase,
        grant_collaborator: GrantCollaboratorUseCase,
    ) -> None:
        self._list = list_collaborators
        self._grant = grant_collaborator

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """List collaborators of convention."""
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        try:
            collaborators = await self._list.execute(req.context.user, conv_id)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = {"items": [collaborator_to_dict(c) for c in collaborators]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
    ) -> None:
        """Grant collaboration to a user. Requires manageCollaborators."""
        try:
            conv_id = UUID(convention_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid convention ID"}
            return

        try:
            body = require_object(await req.get_media())
            user_id = required_str(body, "user_id")
            fields = _parse_rights_fields(body)
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            collaborator = await self._grant.execute(req.context.user, conv_id, user_id, **fields)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = collaborator_to_dict(collaborator)
        resp.status = falcon.HTTP_201


class CollaboratorResource:
    """PATCH/DELETE /v1/conventions/{id}/collaborators/{collaborator_id}."""

    def __init__(
        self,
        update_rights: UpdateCollaboratorRightsUseCase,
        revoke_collaborator: RevokeCollaboratorUseCase,
    ) -> None:
        self._update = update_rights
        self._revoke = revoke_collaborator

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
        collaborator_id: str,
    ) -> None:
        """Change rights, title or per-edition grants."""
        try:
            conv_id = UUID(convention_id)
            collab_id = UUID(collaborator_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid ID"}
            return

        try:
            body = require_object(await req.get_media(default_when_empty={}))
            fields = _parse_rights_fields(body)
        except (KeyError, ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            collaborator = await self._update.execute(
                req.context.user, conv_id, collab_id, **fields
            )
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = collaborator_to_dict(collaborator)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        convention_id: str,
        collaborator_id: str,
    ) -> None:
        """Revoke collaborator."""
        try:
            conv_id = UUID(convention_id)
            collab_id = UUID(collaborator_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid ID"}
            return

        try:
            await self._revoke.execute(req.context.user, conv_id, collab_id)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.status = falcon.HTTP_204
