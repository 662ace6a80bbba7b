"""Purge expired sessions."""

import logging
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


class PurgeExpiredSessionsUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, now: datetime | None = None) -> int:
        """Delete sessions whose expires_at is before now. Returns the count."""
        async with self._uow_factory() as uow:
            count = await uow.sessions.delete_expired(now or datetime.now(UTC))
        logger.info("Purged %d expired sessions", count)
        return count
