"""Role repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import Role


class RoleRepository(Protocol):
    """Port for roles and role-permission bindings."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def create_if_missing(self, role: Role) -> bool: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def list_permission_ids(self, role_ids: list[UUID]) -> set[UUID]: ...

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> bool: ...

    async def replace_permissions(self, role_id: UUID, permission_ids: set[UUID]) -> None: ...
