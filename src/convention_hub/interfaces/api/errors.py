"""Translation of domain errors into HTTP responses."""

import logging

import falcon
import falcon.asgi

from convention_hub.domain.exceptions import (
    AuthorizationDenied,
    Conflict,
    InvariantViolation,
    NotFound,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Conditions callers can act on. InvariantViolation goes to handle_unexpected.
EXPECTED_ERRORS = (NotFound, Unauthenticated, AuthorizationDenied, Conflict, ValidationError)


def error_response(resp: falcon.asgi.Response, error: Exception) -> None:
    """Set status and body for an expected domain error."""
    if isinstance(error, Unauthenticated):
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    elif isinstance(error, AuthorizationDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Insufficient rights"}
    elif isinstance(error, NotFound):
        resp.status = falcon.HTTP_404
        resp.media = {"error": str(error)}
    elif isinstance(error, Conflict):
        resp.status = falcon.HTTP_409
        resp.media = {"error": str(error)}
    else:
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(error)}


async def handle_unexpected(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    """App-level handler: log and answer a generic 500."""
    if isinstance(ex, InvariantViolation):
        logger.critical("Invariant violation on %s %s: %s", req.method, req.path, ex)
    else:
        logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}
