"""Permission history API resource."""

from uuid import UUID

import falcon.asgi

from convention_hub.application.use_cases.history.list_permission_history import (
    ListPermissionHistoryUseCase,
)
from convention_hub.interfaces.api.errors import EXPECTED_ERRORS, error_response
from convention_hub.interfaces.api.resources.serializers import history_entry_to_dict


class PermissionHistoryResource:
    """GET /v1/conventions/{id}/history - permission changes, newest first."""

    def __init__(self, list_history: ListPermissionHistoryUseCase) -> None:
        self._list_history = list_history

    async def on_get(
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

        try:
            entries = await self._list_history.execute(req.context.user, conv_id)
        except EXPECTED_ERRORS as e:
            error_response(resp, e)
            return

        resp.media = {"items": [history_entry_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200
