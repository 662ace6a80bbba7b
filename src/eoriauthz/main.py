"""Application entry point and composition root."""

import argparse
import asyncio
from datetime import timedelta
from uuid import UUID

import falcon.asgi

from eoriauthz import __version__
from eoriauthz.application.dto.seed_payload import load_seed_payload
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.application.use_cases.catalog.load_catalog import LoadCatalogUseCase
from eoriauthz.application.use_cases.catalog.seed_catalog import SeedCatalogUseCase
from eoriauthz.application.use_cases.override.clear_override import (
    ClearPermissionOverrideUseCase,
)
from eoriauthz.application.use_cases.override.set_override import SetPermissionOverrideUseCase
from eoriauthz.application.use_cases.record.clear_record_access import ClearRecordAccessUseCase
from eoriauthz.application.use_cases.record.set_record_access import SetRecordAccessUseCase
from eoriauthz.application.use_cases.role.create_role import CreateRoleUseCase
from eoriauthz.application.use_cases.role.delete_role import DeleteRoleUseCase
from eoriauthz.application.use_cases.role.set_role_permissions import SetRolePermissionsUseCase
from eoriauthz.application.use_cases.session.create_session import CreateSessionUseCase
from eoriauthz.application.use_cases.session.purge_expired_sessions import (
    PurgeExpiredSessionsUseCase,
)
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
from eoriauthz.config import Settings, get_settings
from eoriauthz.infrastructure.auth.session_validator import DatabaseSessionValidator
from eoriauthz.infrastructure.permission.permission_resolver import RBACPermissionResolver
from eoriauthz.infrastructure.permission.role_permission_cache import RolePermissionCache
from eoriauthz.infrastructure.persistence.postgres.connection import create_pool
from eoriauthz.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from eoriauthz.interfaces.api.app import Resources, create_app
from eoriauthz.interfaces.api.middleware.auth import AuthMiddleware
from eoriauthz.interfaces.api.middleware.cors import CORSMiddleware
from eoriauthz.interfaces.api.middleware.lifespan import (
    CatalogLifespanMiddleware,
    PoolLifespanMiddleware,
)
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
from eoriauthz.logging import setup_logging


def create_eoriauthz_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)

    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
    )
    uow_factory = create_uow_factory(pool)

    cache = RolePermissionCache() if settings.role_cache_enabled else None
    resolver = RBACPermissionResolver(
        uow_factory,
        readonly_actions=settings.readonly_actions,
        limited_actions=settings.limited_actions,
        legacy_fallback=settings.legacy_role_fallback,
        cache=cache,
    )
    access = EvaluateAccessUseCase(resolver)
    session_validator = DatabaseSessionValidator(uow_factory)
    payload = load_seed_payload(settings.seed_path)

    resources = Resources(
        health=HealthResource(pool, resolver),
        authorize=AuthorizeResource(access),
        permissions=PermissionsResource(resolver),
        roles=RolesResource(uow_factory, access, CreateRoleUseCase(uow_factory, access)),
        role=RoleResource(DeleteRoleUseCase(uow_factory, access, cache)),
        role_permissions=RolePermissionsResource(
            SetRolePermissionsUseCase(uow_factory, access, cache)
        ),
        user_roles=UserRolesResource(AssignRoleUseCase(uow_factory, access, cache)),
        user_role=UserRoleResource(RevokeRoleUseCase(uow_factory, access, cache)),
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
            SetRecordAccessUseCase(uow_factory, access, set(payload.resource_types)),
            ClearRecordAccessUseCase(uow_factory, access),
        ),
        user_sessions=UserSessionsResource(RevokeUserSessionsUseCase(uow_factory, access)),
        current_session=CurrentSessionResource(
            RevokeSessionUseCase(uow_factory), settings.session_cookie_name
        ),
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    middleware = [
        CORSMiddleware(cors_origins),
        PoolLifespanMiddleware(pool),
        CatalogLifespanMiddleware(
            resolver,
            LoadCatalogUseCase(uow_factory),
            SeedCatalogUseCase(uow_factory) if settings.seed_on_startup else None,
            payload,
        ),
        AuthMiddleware(session_validator, settings.session_cookie_name),
    ]
    return create_app(resources, middleware)


async def _run_with_pool(settings: Settings, work):
    """Open a small pool, run work(uow_factory), close the pool."""
    pool = create_pool(settings.database_url, min_size=1, max_size=2, timeout=settings.pool_timeout)
    await pool.open()
    try:
        return await work(create_uow_factory(pool))
    finally:
        await pool.close()


async def _seed(settings: Settings, args: argparse.Namespace) -> None:
    payload = load_seed_payload(args.path or settings.seed_path)
    result = await _run_with_pool(
        settings, lambda uow_factory: SeedCatalogUseCase(uow_factory).execute(payload)
    )
    print(
        f"permissions +{result.permissions_created}, roles +{result.roles_created}, "
        f"bindings +{result.bindings_created}, resource types {result.resource_types}"
    )


async def _purge_sessions(settings: Settings, args: argparse.Namespace) -> None:
    count = await _run_with_pool(
        settings, lambda uow_factory: PurgeExpiredSessionsUseCase(uow_factory).execute()
    )
    print(f"purged {count} expired sessions")


async def _create_session(settings: Settings, args: argparse.Namespace) -> None:
    ttl = timedelta(hours=args.ttl_hours or settings.session_ttl_hours)
    session = await _run_with_pool(
        settings,
        lambda uow_factory: CreateSessionUseCase(uow_factory, ttl).execute(args.user_id),
    )
    print(session.token)


def run_server(settings: Settings | None = None, host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(create_eoriauthz_app(settings), host=host, port=port)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="eoriauthz", description=f"EORI authorization v{__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    seed = sub.add_parser("seed", help="Apply the RBAC seed payload")
    seed.add_argument("--path", help="Seed JSON file; packaged payload when omitted")

    sub.add_parser("purge-sessions", help="Delete expired sessions")

    create = sub.add_parser("create-session", help="Issue a session token for a user")
    create.add_argument("user_id", type=UUID)
    create.add_argument("--ttl-hours", type=int, default=None)

    args = parser.parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        run_server(settings, host=args.host, port=args.port)
        return

    setup_logging(settings.log_level, json_format=settings.log_json)
    commands = {
        "seed": _seed,
        "purge-sessions": _purge_sessions,
        "create-session": _create_session,
    }
    asyncio.run(commands[args.command](settings, args))


if __name__ == "__main__":
    main()
