"""Revoke login sessions."""

import logging
from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase

logger = logging.getLogger(__name__)


class RevokeSessionUseCase:
    """Delete one session (logout). Unknown tokens are ignored."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, token: str) -> None:
        async with self._uow_factory() as uow:
            await uow.sessions.delete(token)


class RevokeUserSessionsUseCase:
    """Delete every session of a user, e.g. after a password change.

    Self-revocation is always allowed; revoking someone else's sessions
    requires sessions.manage.
    """

    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(self, actor_id: UUID, user_id: UUID) -> int:
        if actor_id != user_id:
            await self._access.require(actor_id, "sessions.manage", "session")

        async with self._uow_factory() as uow:
            count = await uow.sessions.delete_for_user(user_id)
        logger.info("Sessions revoked", extra={"user_id": str(user_id), "count": count})
        return count
