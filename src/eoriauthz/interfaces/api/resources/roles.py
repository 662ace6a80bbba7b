"""Role administration resources."""

import falcon.asgi

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.application.use_cases.role.create_role import CreateRoleUseCase
from eoriauthz.application.use_cases.role.delete_role import DeleteRoleUseCase
from eoriauthz.application.use_cases.role.set_role_permissions import SetRolePermissionsUseCase
from eoriauthz.domain.entities import Role
from eoriauthz.domain.exceptions import ValidationError
from eoriauthz.interfaces.api.resources.common import current_user, parse_uuid, read_body


def _role_to_dict(role: Role) -> dict:
    return {
        "id": str(role.id),
        "name": role.name,
        "display_name": role.display_name,
        "description": role.description,
        "is_system": role.is_system,
        "is_active": role.is_active,
    }


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access: EvaluateAccessUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._access.require(user.user_id, "roles.read", "role")
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        resp.media = {"items": [_role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        name = body.get("name")
        if not isinstance(name, str):
            raise ValidationError("name is required")
        role = await self._create.execute(
            user.user_id,
            name,
            display_name=body.get("display_name"),
            description=body.get("description"),
        )
        resp.media = _role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """DELETE /v1/roles/{role_id}."""

    def __init__(self, delete_role: DeleteRoleUseCase) -> None:
        self._delete = delete_role

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._delete.execute(user.user_id, parse_uuid(role_id, "role ID"))
        resp.status = falcon.HTTP_204


class RolePermissionsResource:
    """PUT /v1/roles/{role_id}/permissions - replace the role's permission set."""

    def __init__(self, set_role_permissions: SetRolePermissionsUseCase) -> None:
        self._set = set_role_permissions

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        names = body.get("permissions")
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValidationError("permissions must be a list of permission names")

        ids = await self._set.execute(user.user_id, parse_uuid(role_id, "role ID"), names)
        resp.media = {"role_id": role_id, "permissions": sorted(set(names)), "count": len(ids)}
        resp.status = falcon.HTTP_200
