"""Replace a role's permission set."""

from uuid import UUID

from eoriauthz.application.ports import PermissionCacheInvalidator
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound


class SetRolePermissionsUseCase:
    """Replace all role_permission rows of a role in one transaction."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        cache: PermissionCacheInvalidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._cache = cache

    async def execute(self, actor_id: UUID, role_id: UUID, permission_names: list[str]) -> set[UUID]:
        """Returns the new set of permission ids."""
        await self._access.require(actor_id, "roles.manage", "role")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))

            permission_ids: set[UUID] = set()
            for name in dict.fromkeys(permission_names):
                perm = await uow.permissions.get_by_name(name)
                if not perm:
                    raise NotFound("Permission", name)
                permission_ids.add(perm.id)

            await uow.roles.replace_permissions(role_id, permission_ids)

        if self._cache is not None:
            self._cache.invalidate_role(role_id)
        return permission_ids
