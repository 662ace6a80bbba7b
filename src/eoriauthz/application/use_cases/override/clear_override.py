"""Clear user permission override."""

from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound


class ClearPermissionOverrideUseCase:
    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(self, actor_id: UUID, user_id: UUID, permission_name: str) -> None:
        """Remove the override so roles decide again."""
        await self._access.require(actor_id, "permissions.manage", "permission")

        async with self._uow_factory() as uow:
            perm = await uow.permissions.get_by_name(permission_name)
            if not perm:
                raise NotFound("Permission", permission_name)
            if not await uow.overrides.get(user_id, perm.id):
                raise NotFound("Override", f"{user_id}/{permission_name}")
            await uow.overrides.delete(user_id, perm.id)
