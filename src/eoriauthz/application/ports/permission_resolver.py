"""Permission resolver port - the authorization decision function."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.value_objects import Decision


class PermissionResolver(Protocol):
    """Port for deciding whether a user may perform an action."""

    async def decide(
        self,
        user_id: UUID | None,
        action: str,
        resource_type: str,
        resource_id: str | None = None,
        tenant_id: UUID | None = None,
    ) -> Decision: ...
