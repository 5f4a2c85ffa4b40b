"""User entity - the acting identity supplied by the auth layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Acting user. Global admins bypass every resource-level check."""

    id: str
    is_global_admin: bool = False
    email: str | None = None
    username: str | None = None
