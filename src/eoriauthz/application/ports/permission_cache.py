"""Port for invalidating cached role expansions after registry writes."""

from typing import Protocol
from uuid import UUID


class PermissionCacheInvalidator(Protocol):
    def invalidate_user(self, user_id: UUID) -> None: ...

    def invalidate_role(self, role_id: UUID) -> None: ...
