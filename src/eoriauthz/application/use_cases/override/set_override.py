"""Set user permission override."""

from datetime import UTC, datetime
from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import PermissionOverride
from eoriauthz.domain.exceptions import NotFound


class SetPermissionOverrideUseCase:
    """Grant or deny one permission to a user regardless of roles."""

    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(
        self,
        actor_id: UUID,
        user_id: UUID,
        permission_name: str,
        granted: bool,
    ) -> PermissionOverride:
        """Create or replace the override. Actor needs permissions.manage."""
        await self._access.require(actor_id, "permissions.manage", "permission")

        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            perm = await uow.permissions.get_by_name(permission_name)
            if not perm:
                raise NotFound("Permission", permission_name)
            override = PermissionOverride(
                user_id=user_id,
                permission_id=perm.id,
                granted=granted,
                created_at=datetime.now(UTC),
                created_by=actor_id,
            )
            await uow.overrides.upsert(override)
        return override
