"""Shape checks for JSON request bodies.

Helpers raise KeyError, TypeError or ValueError; resources answer each with 400.
"""

from typing import Any
from uuid import UUID


def require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TypeError("Request body must be a JSON object")
    return body


def optional_str(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def required_str(body: dict[str, Any], key: str) -> str:
    value = optional_str(body, key)
    if value is None:
        raise KeyError(key)
    return value


def optional_object(body: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = body.get(key)
    if value is not None and not isinstance(value, dict):
        raise TypeError(f"{key} must be an object")
    return value


def optional_list(body: dict[str, Any], key: str) -> list[Any] | None:
    value = body.get(key)
    if value is not None and not isinstance(value, list):
        raise TypeError(f"{key} must be a list")
    return value


def parse_uuid(value: Any, key: str) -> UUID:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a UUID string")
    return UUID(value)
