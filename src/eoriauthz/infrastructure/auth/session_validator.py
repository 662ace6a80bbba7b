"""Session validator - resolves an opaque token to a trusted user id."""

from datetime import UTC, datetime

from eoriauthz.application.ports import SessionValidation
from eoriauthz.domain.value_objects import SessionStatus


class DatabaseSessionValidator:
    """Looks the token up and compares expires_at with the request time.

    Read-only: expired rows are left for the purge job.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def validate(self, token: str | None, now: datetime | None = None) -> SessionValidation:
        """Return VALID with the user id, EXPIRED, or NOT_FOUND."""
        if not token:
            return SessionValidation(SessionStatus.NOT_FOUND)

        async with self._uow_factory() as uow:
            session = await uow.sessions.get(token)

        if session is None:
            return SessionValidation(SessionStatus.NOT_FOUND)
        if session.is_expired(now or datetime.now(UTC)):
            return SessionValidation(SessionStatus.EXPIRED)
        return SessionValidation(SessionStatus.VALID, session.user_id)
