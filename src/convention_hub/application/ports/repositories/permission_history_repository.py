"""Permission history (audit ledger) port - append only."""

from typing import Protocol
from uuid import UUID

from convention_hub.domain.entities import PermissionHistoryEntry


class PermissionHistoryRepository(Protocol):
    """Port for the append-only permission history."""

    async def record(self, entry: PermissionHistoryEntry) -> PermissionHistoryEntry: ...

    async def list_by_convention(
        self, convention_id: UUID, limit: int = 200
    ) -> list[PermissionHistoryEntry]: ...
