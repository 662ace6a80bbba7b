"""Tenant (parish) membership repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import TenantMembership


class TenantAccessRepository(Protocol):
    """Port for user-parish memberships."""

    async def get(self, user_id: UUID, parish_id: UUID) -> TenantMembership | None: ...

    async def list_for_user(self, user_id: UUID) -> list[TenantMembership]: ...

    async def upsert(self, membership: TenantMembership) -> TenantMembership: ...

    async def delete(self, user_id: UUID, parish_id: UUID) -> None: ...
