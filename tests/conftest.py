"""Pytest fixtures for eoriauthz tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from eoriauthz.application.dto.seed_payload import SeedPayload, load_seed_payload
from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import (
    AppUser,
    Permission,
    PermissionOverride,
    RecordAccess,
    Role,
    Session,
    TenantMembership,
    UserRole,
)
from eoriauthz.domain.permission_catalog import PermissionCatalog
from eoriauthz.domain.value_objects import AccessLevel, LegacyRole
from eoriauthz.infrastructure.permission.permission_resolver import RBACPermissionResolver


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission catalog and resource types."""

    def __init__(self) -> None:
        self._by_name: dict[str, Permission] = {}
        self._resource_types: dict[str, str] = {}

    async def list_all(self) -> list[Permission]:
        return sorted(self._by_name.values(), key=lambda p: p.name)

    async def get_by_name(self, name: str) -> Permission | None:
        return self._by_name.get(name)

    async def create_if_missing(self, permission: Permission) -> bool:
        if permission.name in self._by_name:
            return False
        self._by_name[permission.name] = permission
        return True

    async def list_resource_types(self) -> dict[str, str]:
        return dict(self._resource_types)

    async def upsert_resource_type(self, resource_type: str, category: str) -> None:
        self._resource_types[resource_type] = category

    async def delete(self, permission_id: UUID) -> None:
        for name, p in list(self._by_name.items()):
            if p.id == permission_id and not p.is_system:
                del self._by_name[name]

    def add(self, permission: Permission) -> None:
        self._by_name[permission.name] = permission


class FakeRoleRepository:
    """In-memory roles with role_permission bindings."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._bindings: dict[UUID, set[UUID]] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        return next((r for r in self._by_id.values() if r.name == name), None)

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.name)

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def create_if_missing(self, role: Role) -> bool:
        if await self.get_by_name(role.name):
            return False
        self._by_id[role.id] = role
        return True

    async def delete(self, role_id: UUID) -> None:
        self._by_id.pop(role_id, None)
        self._bindings.pop(role_id, None)

    async def list_permission_ids(self, role_ids: list[UUID]) -> set[UUID]:
        ids: set[UUID] = set()
        for rid in role_ids:
            ids |= self._bindings.get(rid, set())
        return ids

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> bool:
        bound = self._bindings.setdefault(role_id, set())
        if permission_id in bound:
            return False
        bound.add(permission_id)
        return True

    async def replace_permissions(self, role_id: UUID, permission_ids: set[UUID]) -> None:
        self._bindings[role_id] = set(permission_ids)

    def add_role(self, role: Role, permission_ids: set[UUID] | None = None) -> None:
        """Helper to register a role with bindings (for tests)."""
        self._by_id[role.id] = role
        self._bindings[role.id] = set(permission_ids or ())


class FakeUserRoleRepository:
    """In-memory user-role bindings; counts lookups for cache tests."""

    def __init__(self, roles: FakeRoleRepository) -> None:
        self._roles = roles
        self._by_key: dict[tuple[UUID, UUID], UserRole] = {}
        self.lookups = 0

    async def list_roles_for_user(self, user_id: UUID) -> list[Role]:
        self.lookups += 1
        return [
            self._roles._by_id[rid]
            for (uid, rid) in self._by_key
            if uid == user_id and rid in self._roles._by_id
        ]

    async def get(self, user_id: UUID, role_id: UUID) -> UserRole | None:
        return self._by_key.get((user_id, role_id))

    async def create(self, user_role: UserRole) -> UserRole:
        self._by_key[(user_role.user_id, user_role.role_id)] = user_role
        return user_role

    async def delete(self, user_id: UUID, role_id: UUID) -> None:
        self._by_key.pop((user_id, role_id), None)


class FakePermissionOverrideRepository:
    def __init__(self) -> None:
        self._by_key: dict[tuple[UUID, UUID], PermissionOverride] = {}

    async def get(self, user_id: UUID, permission_id: UUID) -> PermissionOverride | None:
        return self._by_key.get((user_id, permission_id))

    async def list_for_user(self, user_id: UUID) -> list[PermissionOverride]:
        return [o for (uid, _), o in self._by_key.items() if uid == user_id]

    async def upsert(self, override: PermissionOverride) -> PermissionOverride:
        self._by_key[(override.user_id, override.permission_id)] = override
        return override

    async def delete(self, user_id: UUID, permission_id: UUID) -> None:
        self._by_key.pop((user_id, permission_id), None)


class FakeTenantAccessRepository:
    def __init__(self) -> None:
        self._by_key: dict[tuple[UUID, UUID], TenantMembership] = {}

    async def get(self, user_id: UUID, parish_id: UUID) -> TenantMembership | None:
        return self._by_key.get((user_id, parish_id))

    async def list_for_user(self, user_id: UUID) -> list[TenantMembership]:
        items = [m for (uid, _), m in self._by_key.items() if uid == user_id]
        return sorted(items, key=lambda m: m.id)

    async def upsert(self, membership: TenantMembership) -> TenantMembership:
        self._by_key[(membership.user_id, membership.parish_id)] = membership
        return membership

    async def delete(self, user_id: UUID, parish_id: UUID) -> None:
        self._by_key.pop((user_id, parish_id), None)


class FakeRecordAccessRepository:
    def __init__(self) -> None:
        self._by_key: dict[tuple[UUID, str, str], RecordAccess] = {}

    async def get(self, user_id: UUID, resource_type: str, resource_id: str) -> RecordAccess | None:
        return self._by_key.get((user_id, resource_type, resource_id))

    async def upsert(self, entry: RecordAccess) -> RecordAccess:
        self._by_key[(entry.user_id, entry.resource_type, entry.resource_id)] = entry
        return entry

    async def delete(self, user_id: UUID, resource_type: str, resource_id: str) -> None:
        self._by_key.pop((user_id, resource_type, resource_id), None)


class FakeSessionRepository:
    def __init__(self) -> None:
        self._by_token: dict[str, Session] = {}

    async def get(self, token: str) -> Session | None:
        return self._by_token.get(token)

    async def create(self, session: Session) -> Session:
        self._by_token[session.token] = session
        return session

    async def delete(self, token: str) -> None:
        self._by_token.pop(token, None)

    async def delete_for_user(self, user_id: UUID) -> int:
        tokens = [t for t, s in self._by_token.items() if s.user_id == user_id]
        for t in tokens:
            del self._by_token[t]
        return len(tokens)

    async def delete_expired(self, now: datetime) -> int:
        tokens = [t for t, s in self._by_token.items() if s.expires_at < now]
        for t in tokens:
            del self._by_token[t]
        return len(tokens)


class FakeUserRepository:
    def __init__(self) -> None:
        self._by_id: dict[UUID, AppUser] = {}

    async def get_by_id(self, user_id: UUID) -> AppUser | None:
        return self._by_id.get(user_id)

    def add_user(self, legacy_role: LegacyRole | None = None, user_id: UUID | None = None) -> AppUser:
        """Helper to register a user (for tests)."""
        user = AppUser(id=user_id or uuid4(), email=f"{uuid4().hex[:8]}@eori.test", legacy_role=legacy_role)
        self._by_id[user.id] = user
        return user


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.roles = FakeRoleRepository()
        self.user_roles = FakeUserRoleRepository(self.roles)
        self.overrides = FakePermissionOverrideRepository()
        self.tenants = FakeTenantAccessRepository()
        self.records = FakeRecordAccessRepository()
        self.sessions = FakeSessionRepository()
        self.users = FakeUserRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    # --- helpers for arranging registry state ---

    def populate(self, payload: SeedPayload) -> PermissionCatalog:
        """Load a seed payload straight into the fakes and return its catalog."""
        for p in payload.permissions:
            self.permissions.add(
                Permission(id=uuid4(), resource=p.resource, action=p.action, name=p.name)
            )
        for r in payload.roles:
            self.roles.add_role(Role(id=uuid4(), name=r.name, is_system=True))
        for role_name, names in payload.role_permissions.items():
            role = next(x for x in self.roles._by_id.values() if x.name == role_name)
            self.roles._bindings[role.id] = {self.permissions._by_name[n].id for n in names}
        self.permissions._resource_types.update(payload.resource_types)
        return PermissionCatalog(self.permissions._by_name.values(), payload.resource_types)

    def role(self, name: str) -> Role:
        return next(r for r in self.roles._by_id.values() if r.name == name)

    def permission(self, name: str) -> Permission:
        return self.permissions._by_name[name]

    def bind_role(self, user_id: UUID, role_name: str) -> None:
        role = self.role(role_name)
        self.user_roles._by_key[(user_id, role.id)] = UserRole(user_id, role.id, datetime.now(UTC))

    def set_override(self, user_id: UUID, permission_name: str, granted: bool) -> None:
        perm = self.permission(permission_name)
        self.overrides._by_key[(user_id, perm.id)] = PermissionOverride(
            user_id=user_id,
            permission_id=perm.id,
            granted=granted,
            created_at=datetime.now(UTC),
        )

    def add_membership(
        self,
        user_id: UUID,
        parish_id: UUID,
        level: AccessLevel = AccessLevel.FULL,
        is_primary: bool = False,
        membership_id: UUID | None = None,
    ) -> TenantMembership:
        m = TenantMembership(
            id=membership_id or uuid4(),
            user_id=user_id,
            parish_id=parish_id,
            access_level=level,
            is_primary=is_primary,
            created_at=datetime.now(UTC),
        )
        self.tenants._by_key[(user_id, parish_id)] = m
        return m

    def set_record(self, user_id: UUID, resource_type: str, resource_id: str, granted: bool) -> None:
        self.records._by_key[(user_id, resource_type, resource_id)] = RecordAccess(
            user_id=user_id,
            resource_type=resource_type,
            resource_id=resource_id,
            granted=granted,
            created_at=datetime.now(UTC),
        )


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture(scope="session")
def seed_payload() -> SeedPayload:
    """Packaged RBAC seed."""
    return load_seed_payload()


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def catalog(fake_uow: FakeUnitOfWork, seed_payload: SeedPayload) -> PermissionCatalog:
    """Catalog from the packaged seed, with the fakes populated to match."""
    return fake_uow.populate(seed_payload)


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory sharing fake_uow, so arranged state is visible to use cases."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def resolver(uow_factory, catalog: PermissionCatalog) -> RBACPermissionResolver:
    return RBACPermissionResolver(
        uow_factory,
        catalog,
        limited_actions={"*": ["read", "view"], "document": ["read", "create"]},
    )


@pytest.fixture
def access(resolver: RBACPermissionResolver) -> EvaluateAccessUseCase:
    return EvaluateAccessUseCase(resolver)


@pytest.fixture
def admin_user(fake_uow: FakeUnitOfWork, catalog: PermissionCatalog) -> AppUser:
    """User bound to the episcop role (system.all)."""
    user = fake_uow.users.add_user()
    fake_uow.bind_role(user.id, "episcop")
    return user


@pytest.fixture
def plain_user(fake_uow: FakeUnitOfWork, catalog: PermissionCatalog) -> AppUser:
    """User bound to the secretar role only."""
    user = fake_uow.users.add_user()
    fake_uow.bind_role(user.id, "secretar")
    return user
