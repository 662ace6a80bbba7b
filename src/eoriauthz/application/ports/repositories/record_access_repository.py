"""Record-level access repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import RecordAccess


class RecordAccessRepository(Protocol):
    """Port for per-record grant/deny entries."""

    async def get(
        self, user_id: UUID, resource_type: str, resource_id: str
    ) -> RecordAccess | None: ...

    async def upsert(self, entry: RecordAccess) -> RecordAccess: ...

    async def delete(self, user_id: UUID, resource_type: str, resource_id: str) -> None: ...
