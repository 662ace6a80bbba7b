"""User-role binding repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import Role, UserRole


class UserRoleRepository(Protocol):
    """Port for user-role bindings."""

    async def list_roles_for_user(self, user_id: UUID) -> list[Role]: ...

    async def get(self, user_id: UUID, role_id: UUID) -> UserRole | None: ...

    async def create(self, user_role: UserRole) -> UserRole: ...

    async def delete(self, user_id: UUID, role_id: UUID) -> None: ...
