"""Permission catalog repository port."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for catalog persistence."""

    async def list_all(self) -> list[Permission]: ...

    async def get_by_name(self, name: str) -> Permission | None: ...

    async def create_if_missing(self, permission: Permission) -> bool: ...

    async def list_resource_types(self) -> dict[str, str]: ...

    async def upsert_resource_type(self, resource_type: str, category: str) -> None: ...

    async def delete(self, permission_id: UUID) -> None: ...
