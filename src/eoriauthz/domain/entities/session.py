"""Login session."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Session:
    """Opaque session token bound to a user until expires_at."""

    token: str
    user_id: UUID
    expires_at: datetime
    created_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
