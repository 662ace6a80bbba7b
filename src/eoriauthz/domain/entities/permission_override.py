"""Per-user explicit grant or deny of one permission."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class PermissionOverride:
    """Override independent of role membership. granted=False is an explicit deny."""

    user_id: UUID
    permission_id: UUID
    granted: bool
    created_at: datetime
    created_by: UUID | None = None
