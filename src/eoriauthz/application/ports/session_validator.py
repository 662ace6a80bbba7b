"""Session validator port."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from eoriauthz.domain.value_objects import SessionStatus


@dataclass(frozen=True)
class SessionValidation:
    """Validation result; user_id is set only when status is VALID."""

    status: SessionStatus
    user_id: UUID | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is SessionStatus.VALID


class SessionValidator(Protocol):
    async def validate(self, token: str | None, now: datetime | None = None) -> SessionValidation: ...
