"""Session repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import Session


class SessionRepository(Protocol):
    """Port for login sessions."""

    async def get(self, token: str) -> Session | None: ...

    async def create(self, session: Session) -> Session: ...

    async def delete(self, token: str) -> None: ...

    async def delete_for_user(self, user_id: UUID) -> int: ...

    async def delete_expired(self, now: datetime) -> int: ...
