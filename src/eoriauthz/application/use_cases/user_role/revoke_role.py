"""Revoke role from user."""

from uuid import UUID

from eoriauthz.application.ports import PermissionCacheInvalidator
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound


class RevokeRoleUseCase:
    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        cache: PermissionCacheInvalidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._cache = cache

    async def execute(self, actor_id: UUID, user_id: UUID, role_id: UUID) -> None:
        """Remove the binding. Actor needs roles.manage."""
        await self._access.require(actor_id, "roles.manage", "role")

        async with self._uow_factory() as uow:
            if not await uow.user_roles.get(user_id, role_id):
                raise NotFound("UserRole", f"{user_id}/{role_id}")
            await uow.user_roles.delete(user_id, role_id)

        if self._cache is not None:
            self._cache.invalidate_user(user_id)
