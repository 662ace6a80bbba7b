"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi

from eoriauthz.interfaces.api.errors import register_error_handlers
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


@dataclass
class Resources:
    health: HealthResource
    authorize: AuthorizeResource
    permissions: PermissionsResource
    roles: RolesResource
    role: RoleResource
    role_permissions: RolePermissionsResource
    user_roles: UserRolesResource
    user_role: UserRoleResource
    user_override: UserOverrideResource
    user_parishes: UserParishesResource
    user_parish: UserParishResource
    user_record: UserRecordResource
    user_sessions: UserSessionsResource
    current_session: CurrentSessionResource


def create_app(resources: Resources, middleware: list | None = None) -> falcon.asgi.App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/authorize", resources.authorize)
    app.add_route("/v1/permissions", resources.permissions)
    app.add_route("/v1/roles", resources.roles)
    app.add_route("/v1/roles/{role_id}", resources.role)
    app.add_route("/v1/roles/{role_id}/permissions", resources.role_permissions)
    app.add_route("/v1/users/{user_id}/roles", resources.user_roles)
    app.add_route("/v1/users/{user_id}/roles/{role_id}", resources.user_role)
    app.add_route("/v1/users/{user_id}/overrides/{permission_name}", resources.user_override)
    app.add_route("/v1/users/{user_id}/parishes", resources.user_parishes)
    app.add_route("/v1/users/{user_id}/parishes/{parish_id}", resources.user_parish)
    app.add_route(
        "/v1/users/{user_id}/records/{resource_type}/{resource_id}", resources.user_record
    )
    app.add_route("/v1/users/{user_id}/sessions", resources.user_sessions)
    app.add_route("/v1/sessions/current", resources.current_session)
    return app
