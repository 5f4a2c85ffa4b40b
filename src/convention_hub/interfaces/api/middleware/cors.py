"""CORS middleware for browser clients of the conventions API."""

import falcon.asgi

_ALLOWED_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
_ALLOWED_HEADERS = "Authorization, Content-Type"


class CORSMiddleware:
    """Echoes an allowed Origin and answers OPTIONS preflight requests.

    An origin list containing "*" allows every origin.
    """

    def __init__(self, origins: list[str]) -> None:
        self._allow_any = "*" in origins
        self._origins = frozenset(o for o in origins if o != "*")

    def _allowed(self, origin: str | None) -> bool:
        if not origin:
            return False
        return self._allow_any or origin in self._origins

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Short-circuit preflight; headers are added in process_response."""
        if req.method == "OPTIONS" and req.get_header("Access-Control-Request-Method"):
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        origin = req.get_header("Origin")
        if not self._allowed(origin):
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Vary", "Origin")
        if req.method == "OPTIONS":
            resp.set_header("Access-Control-Allow-Methods", _ALLOWED_METHODS)
            resp.set_header("Access-Control-Allow-Headers", _ALLOWED_HEADERS)
            resp.set_header("Access-Control-Max-Age", "86400")
