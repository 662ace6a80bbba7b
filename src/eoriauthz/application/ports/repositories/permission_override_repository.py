"""User permission override repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import PermissionOverride


class PermissionOverrideRepository(Protocol):
    """Port for per-user permission overrides."""

    async def get(self, user_id: UUID, permission_id: UUID) -> PermissionOverride | None: ...

    async def list_for_user(self, user_id: UUID) -> list[PermissionOverride]: ...

    async def upsert(self, override: PermissionOverride) -> PermissionOverride: ...

    async def delete(self, user_id: UUID, permission_id: UUID) -> None: ...
