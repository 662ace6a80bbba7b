"""Create role use case."""

from uuid import UUID, uuid4

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import Role
from eoriauthz.domain.exceptions import ValidationError


class CreateRoleUseCase:
    """Create a custom (non-system) role. Actor needs roles.manage."""

    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(
        self,
        actor_id: UUID,
        name: str,
        display_name: str | None = None,
        description: str | None = None,
    ) -> Role:
        await self._access.require(actor_id, "roles.manage", "role")

        name = name.strip()
        if not name or len(name) > 50:
            raise ValidationError("Role name must be 1-50 characters")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise ValidationError(f"Role already exists: {name}")
            role = Role(
                id=uuid4(),
                name=name,
                display_name=display_name,
                description=description,
                is_system=False,
                is_active=True,
            )
            await uow.roles.create(role)
        return role
