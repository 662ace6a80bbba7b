"""Set record-level access entry."""

from datetime import UTC, datetime
from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import RecordAccess
from eoriauthz.domain.exceptions import NotFound, ValidationError


class SetRecordAccessUseCase:
    """Grant or deny one user access to one record instance."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        resource_types: set[str] | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._resource_types = resource_types

    async def execute(
        self,
        actor_id: UUID,
        user_id: UUID,
        resource_type: str,
        resource_id: str,
        granted: bool,
    ) -> RecordAccess:
        """Create or replace the entry. Actor needs permissions.manage."""
        await self._access.require(actor_id, "permissions.manage", "permission")

        if not resource_id:
            raise ValidationError("resource_id is required")
        if self._resource_types is not None and resource_type not in self._resource_types:
            raise ValidationError(f"Unknown resource type: {resource_type}")

        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            entry = RecordAccess(
                user_id=user_id,
                resource_type=resource_type,
                resource_id=resource_id,
                granted=granted,
                created_at=datetime.now(UTC),
                created_by=actor_id,
            )
            await uow.records.upsert(entry)
        return entry
