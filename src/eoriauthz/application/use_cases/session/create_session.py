"""Create login session."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from eoriauthz.domain.entities import Session
from eoriauthz.domain.exceptions import NotFound

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)


def generate_session_token() -> str:
    return secrets.token_urlsafe(32)


class CreateSessionUseCase:
    """Issue an opaque session token for an authenticated user.

    Credential checks happen before this is called; the use case only binds
    a fresh token to the user id.
    """

    def __init__(self, unit_of_work_factory: type, ttl: timedelta = DEFAULT_SESSION_TTL) -> None:
        self._uow_factory = unit_of_work_factory
        self._ttl = ttl

    async def execute(
        self,
        user_id: UUID,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Session:
        now = datetime.now(UTC)
        session = Session(
            token=generate_session_token(),
            user_id=user_id,
            expires_at=now + self._ttl,
            created_at=now,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            await uow.sessions.create(session)
        logger.info("Session created", extra={"user_id": str(user_id)})
        return session
