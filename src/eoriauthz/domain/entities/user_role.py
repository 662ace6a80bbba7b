"""User-role binding."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class UserRole:
    """User holds role. Unique per (user_id, role_id)."""

    user_id: UUID
    role_id: UUID
    assigned_at: datetime | None = None
