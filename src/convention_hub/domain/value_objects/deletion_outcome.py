"""Outcome of a convention deletion request."""

from enum import StrEnum


class DeletionOutcome(StrEnum):
    DELETE = "delete"
    ARCHIVE = "archive"
