"""Assign role to user."""

from datetime import UTC, datetime
from uuid import UUID

from eoriauthz.application.ports import PermissionCacheInvalidator
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import UserRole
from eoriauthz.domain.exceptions import NotFound, ValidationError


class AssignRoleUseCase:
    """Bind a role to a user. Actor needs roles.manage."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        cache: PermissionCacheInvalidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._cache = cache

    async def execute(self, actor_id: UUID, user_id: UUID, role_id: UUID) -> UserRole:
        await self._access.require(actor_id, "roles.manage", "role")

        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            if not await uow.roles.get_by_id(role_id):
                raise NotFound("Role", str(role_id))
            if await uow.user_roles.get(user_id, role_id):
                raise ValidationError("This user already has this role")
            binding = UserRole(user_id=user_id, role_id=role_id, assigned_at=datetime.now(UTC))
            await uow.user_roles.create(binding)

        if self._cache is not None:
            self._cache.invalidate_user(user_id)
        return binding
