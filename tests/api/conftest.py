"""Fixtures for API tests."""

from datetime import UTC, datetime, timedelta

import pytest
from falcon.testing import TestClient

from eoriauthz.application.use_cases.override.clear_override import (
    ClearPermissionOverrideUseCase,
)
from eoriauthz.application.use_cases.override.set_override import SetPermissionOverrideUseCase
from eoriauthz.application.use_cases.record.clear_record_access import ClearRecordAccessUseCase
from eoriauthz.application.use_cases.record.set_record_access import SetRecordAccessUseCase
from eoriauthz.application.use_cases.role.create_role import CreateRoleUseCase
from eoriauthz.application.use_cases.role.delete_role import DeleteRoleUseCase
from eoriauthz.application.use_cases.role.set_role_permissions import SetRolePermissionsUseCase
from eoriauthz.application.use_cases.session.revoke_session import (
    RevokeSessionUseCase,
    RevokeUserSessionsUseCase,
)
from eoriauthz.application.use_cases.tenant.grant_tenant_access import GrantTenantAccessUseCase
from eoriauthz.application.use_cases.tenant.list_tenant_access import ListTenantAccessUseCase
from eoriauthz.application.use_cases.tenant.revoke_tenant_access import (
    RevokeTenantAccessUseCase,
)
from eoriauthz.application.use_cases.user_role.assign_role import AssignRoleUseCase
from eoriauthz.application.use_cases.user_role.revoke_role import RevokeRoleUseCase
from eoriauthz.domain.entities import Session
from eoriauthz.infrastructure.auth.session_validator import DatabaseSessionValidator
from eoriauthz.interfaces.api.app import Resources, create_app
from eoriauthz.interfaces.api.middleware.auth import AuthMiddleware
from eoriauthz.interfaces.api.resources.authorize import AuthorizeResource
from eoriauthz.interfaces.api.resources.health import HealthResource
from eoriauthz.interfaces.api.resources.permissions import PermissionsResource
from eoriauthz.interfaces.api.resources.roles import (
    RolePermissionsResource,
    RoleResource,
    RolesResource,
)
from eoriauthz.interfaces.api.resources.sessions import (
    CurrentSessionResource,
    UserSessionsResource,
)
from eoriauthz.interfaces.api.resources.users import (
    UserOverrideResource,
    UserParishesResource,
    UserParishResource,
    UserRecordResource,
    UserRoleResource,
    UserRolesResource,
)

ADMIN_TOKEN = "admin-token"
PLAIN_TOKEN = "plain-token"
EXPIRED_TOKEN = "expired-token"


def build_app(uow_factory, resolver, access, resource_types: set[str]):
    """Falcon ASGI app wired to in-memory fakes."""
    resources = Resources(
        health=HealthResource(resolver=resolver),
        authorize=AuthorizeResource(access),
        permissions=PermissionsResource(resolver),
        roles=RolesResource(uow_factory, access, CreateRoleUseCase(uow_factory, access)),
        role=RoleResource(DeleteRoleUseCase(uow_factory, access)),
        role_permissions=RolePermissionsResource(SetRolePermissionsUseCase(uow_factory, access)),
        user_roles=UserRolesResource(AssignRoleUseCase(uow_factory, access)),
        user_role=UserRoleResource(RevokeRoleUseCase(uow_factory, access)),
        user_override=UserOverrideResource(
            SetPermissionOverrideUseCase(uow_factory, access),
            ClearPermissionOverrideUseCase(uow_factory, access),
        ),
        user_parishes=UserParishesResource(ListTenantAccessUseCase(uow_factory, access)),
        user_parish=UserParishResource(
            GrantTenantAccessUseCase(uow_factory, access),
            RevokeTenantAccessUseCase(uow_factory, access),
        ),
        user_record=UserRecordResource(
            SetRecordAccessUseCase(uow_factory, access, resource_types),
            ClearRecordAccessUseCase(uow_factory, access),
        ),
        user_sessions=UserSessionsResource(RevokeUserSessionsUseCase(uow_factory, access)),
        current_session=CurrentSessionResource(RevokeSessionUseCase(uow_factory)),
    )
    return create_app(resources, [AuthMiddleware(DatabaseSessionValidator(uow_factory))])


@pytest.fixture
def sessions(fake_uow, admin_user, plain_user):
    """Bearer tokens for the admin (episcop) and plain (secretar) users."""
    now = datetime.now(UTC)
    for token, user, expires in [
        (ADMIN_TOKEN, admin_user, now + timedelta(hours=1)),
        (PLAIN_TOKEN, plain_user, now + timedelta(hours=1)),
        (EXPIRED_TOKEN, plain_user, now - timedelta(hours=1)),
    ]:
        fake_uow.sessions._by_token[token] = Session(
            token=token, user_id=user.id, expires_at=expires, created_at=now - timedelta(days=1)
        )
    return {"admin": ADMIN_TOKEN, "plain": PLAIN_TOKEN, "expired": EXPIRED_TOKEN}


@pytest.fixture
def app(uow_factory, resolver, access, catalog, sessions):
    return build_app(uow_factory, resolver, access, set(catalog.resource_types))


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
