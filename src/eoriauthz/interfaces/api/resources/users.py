"""Per-user authorization administration: roles, overrides, parishes, records."""

import falcon.asgi

from eoriauthz.application.use_cases.override.clear_override import (
    ClearPermissionOverrideUseCase,
)
from eoriauthz.application.use_cases.override.set_override import SetPermissionOverrideUseCase
from eoriauthz.application.use_cases.record.clear_record_access import ClearRecordAccessUseCase
from eoriauthz.application.use_cases.record.set_record_access import SetRecordAccessUseCase
from eoriauthz.application.use_cases.tenant.grant_tenant_access import GrantTenantAccessUseCase
from eoriauthz.application.use_cases.tenant.list_tenant_access import ListTenantAccessUseCase
from eoriauthz.application.use_cases.tenant.revoke_tenant_access import (
    RevokeTenantAccessUseCase,
)
from eoriauthz.application.use_cases.user_role.assign_role import AssignRoleUseCase
from eoriauthz.application.use_cases.user_role.revoke_role import RevokeRoleUseCase
from eoriauthz.domain.exceptions import ValidationError
from eoriauthz.domain.value_objects import AccessLevel
from eoriauthz.interfaces.api.resources.common import current_user, parse_uuid, read_body


def _granted(body: dict) -> bool:
    granted = body.get("granted")
    if not isinstance(granted, bool):
        raise ValidationError("granted must be true or false")
    return granted


class UserRolesResource:
    """POST /v1/users/{user_id}/roles - assign role."""

    def __init__(self, assign_role: AssignRoleUseCase) -> None:
        self._assign = assign_role

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        binding = await self._assign.execute(
            user.user_id,
            parse_uuid(user_id, "user ID"),
            parse_uuid(body.get("role_id"), "role_id"),
        )
        resp.media = {
            "user_id": str(binding.user_id),
            "role_id": str(binding.role_id),
            "assigned_at": binding.assigned_at.isoformat(),
        }
        resp.status = falcon.HTTP_201


class UserRoleResource:
    """DELETE /v1/users/{user_id}/roles/{role_id} - revoke role."""

    def __init__(self, revoke_role: RevokeRoleUseCase) -> None:
        self._revoke = revoke_role

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str, role_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._revoke.execute(
            user.user_id, parse_uuid(user_id, "user ID"), parse_uuid(role_id, "role ID")
        )
        resp.status = falcon.HTTP_204


class UserOverrideResource:
    """PUT/DELETE /v1/users/{user_id}/overrides/{permission_name}."""

    def __init__(
        self,
        set_override: SetPermissionOverrideUseCase,
        clear_override: ClearPermissionOverrideUseCase,
    ) -> None:
        self._set = set_override
        self._clear = clear_override

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_name: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        override = await self._set.execute(
            user.user_id, parse_uuid(user_id, "user ID"), permission_name, _granted(body)
        )
        resp.media = {
            "user_id": str(override.user_id),
            "permission": permission_name,
            "granted": override.granted,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_name: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._clear.execute(user.user_id, parse_uuid(user_id, "user ID"), permission_name)
        resp.status = falcon.HTTP_204


class UserParishesResource:
    """GET /v1/users/{user_id}/parishes - list memberships."""

    def __init__(self, list_access: ListTenantAccessUseCase) -> None:
        self._list = list_access

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        memberships = await self._list.execute(user.user_id, parse_uuid(user_id, "user ID"))
        resp.media = {
            "items": [
                {
                    "parish_id": str(m.parish_id),
                    "access_level": m.access_level.value,
                    "is_primary": m.is_primary,
                }
                for m in memberships
            ]
        }
        resp.status = falcon.HTTP_200


class UserParishResource:
    """PUT/DELETE /v1/users/{user_id}/parishes/{parish_id}."""

    def __init__(
        self,
        grant_access: GrantTenantAccessUseCase,
        revoke_access: RevokeTenantAccessUseCase,
    ) -> None:
        self._grant = grant_access
        self._revoke = revoke_access

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str, parish_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        try:
            level = AccessLevel(body.get("access_level", AccessLevel.FULL.value))
        except ValueError:
            raise ValidationError("access_level must be full, readonly or limited") from None
        is_primary = body.get("is_primary")
        if is_primary is not None and not isinstance(is_primary, bool):
            raise ValidationError("is_primary must be true or false")

        membership = await self._grant.execute(
            user.user_id,
            parse_uuid(user_id, "user ID"),
            parse_uuid(parish_id, "parish ID"),
            level,
            is_primary=is_primary,
        )
        resp.media = {
            "parish_id": str(membership.parish_id),
            "access_level": membership.access_level.value,
            "is_primary": membership.is_primary,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str, parish_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._revoke.execute(
            user.user_id, parse_uuid(user_id, "user ID"), parse_uuid(parish_id, "parish ID")
        )
        resp.status = falcon.HTTP_204


class UserRecordResource:
    """PUT/DELETE /v1/users/{user_id}/records/{resource_type}/{resource_id}."""

    def __init__(
        self,
        set_record_access: SetRecordAccessUseCase,
        clear_record_access: ClearRecordAccessUseCase,
    ) -> None:
        self._set = set_record_access
        self._clear = clear_record_access

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        resource_type: str,
        resource_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        entry = await self._set.execute(
            user.user_id, parse_uuid(user_id, "user ID"), resource_type, resource_id, _granted(body)
        )
        resp.media = {
            "resource_type": entry.resource_type,
            "resource_id": entry.resource_id,
            "granted": entry.granted,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        resource_type: str,
        resource_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._clear.execute(
            user.user_id, parse_uuid(user_id, "user ID"), resource_type, resource_id
        )
        resp.status = falcon.HTTP_204
