"""Delete role use case."""

from uuid import UUID

from eoriauthz.application.ports import PermissionCacheInvalidator
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound, ValidationError


class DeleteRoleUseCase:
    """Delete a custom role with its bindings. System roles cannot be deleted."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        cache: PermissionCacheInvalidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._cache = cache

    async def execute(self, actor_id: UUID, role_id: UUID) -> None:
        await self._access.require(actor_id, "roles.manage", "role")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            if role.is_system:
                raise ValidationError(f"System role cannot be deleted: {role.name}")
            await uow.roles.delete(role_id)

        if self._cache is not None:
            self._cache.invalidate_role(role_id)
