"""Auth middleware - resolves the acting user from a bearer token."""

import falcon.asgi

from convention_hub.domain.entities import User
from convention_hub.infrastructure.auth.keycloak_provider import KeycloakProvider


class AuthMiddleware:
    """Middleware that validates the token and sets req.context.user.

    No header or an invalid token leaves req.context.user as None; the
    permission core then refuses with Unauthenticated.
    """

    def __init__(
        self,
        keycloak_provider: KeycloakProvider | None = None,
        global_admin_role: str = "global-admin",
    ) -> None:
        self._keycloak = keycloak_provider
        self._global_admin_role = global_admin_role

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return

        oidc_user = self._keycloak.decode_token(auth[7:])
        if oidc_user and oidc_user.user_id:
            req.context.user = User(
                id=oidc_user.user_id,
                is_global_admin=self._global_admin_role in oidc_user.realm_roles,
                email=oidc_user.email,
                username=oidc_user.username,
            )
