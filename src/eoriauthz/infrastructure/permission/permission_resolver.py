"""Permission resolver - composes roles, overrides, tenant and record layers.

Layers are applied in order; a later layer replaces the outcome of an earlier
one only when it has an opinion:

    record deny > record grant > tenant deny > override deny
        > override grant > role-derived grant > default deny

system.all satisfies the permission check but never tenant or record checks.
"""

from collections.abc import Iterable, Mapping
from uuid import UUID

from eoriauthz.application.ports import UnitOfWork
from eoriauthz.domain.entities import Permission, PermissionOverride
from eoriauthz.domain.exceptions import StoreUnavailable, UnknownPermission
from eoriauthz.domain.permission_catalog import (
    SYSTEM_ADMIN,
    SYSTEM_ALL,
    PermissionCatalog,
    implied_by_admin,
)
from eoriauthz.domain.value_objects import AccessLevel, Decision, ReasonCode
from eoriauthz.infrastructure.permission.legacy_roles import legacy_permissions
from eoriauthz.infrastructure.permission.role_permission_cache import (
    CachedExpansion,
    RolePermissionCache,
)

DEFAULT_READONLY_ACTIONS = frozenset({"read", "view", "list", "export"})
ANY_RESOURCE_TYPE = "*"


class RBACPermissionResolver:
    """Decides whether a trusted user id may perform an action.

    Stateless apart from the optional role cache; each call opens one unit of
    work and only reads from it. Store failures propagate as StoreUnavailable,
    as does a call made before the catalog snapshot is installed.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog | None = None,
        *,
        readonly_actions: Iterable[str] = DEFAULT_READONLY_ACTIONS,
        limited_actions: Mapping[str, Iterable[str]] | None = None,
        legacy_fallback: bool = True,
        cache: RolePermissionCache | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._readonly_actions = frozenset(readonly_actions)
        self._limited_actions = {
            rtype: frozenset(actions) for rtype, actions in (limited_actions or {}).items()
        }
        self._legacy_fallback = legacy_fallback
        self._cache = cache

    @property
    def catalog(self) -> PermissionCatalog:
        if self._catalog is None:
            raise StoreUnavailable("Permission catalog not loaded")
        return self._catalog

    @property
    def catalog_loaded(self) -> bool:
        return self._catalog is not None

    def set_catalog(self, catalog: PermissionCatalog) -> None:
        """Install the snapshot loaded at startup."""
        self._catalog = catalog

    async def decide(
        self,
        user_id: UUID | str | None,
        action: str,
        resource_type: str,
        resource_id: str | None = None,
        tenant_id: UUID | None = None,
    ) -> Decision:
        """Return allow/deny with the reason that decided it."""
        uid = _coerce_user_id(user_id)
        if uid is None:
            return Decision.deny(ReasonCode.CALLER_ERROR)

        try:
            permission = self.catalog.resolve(action, resource_type)
        except UnknownPermission:
            return Decision.deny(ReasonCode.UNKNOWN_PERMISSION)

        async with self._uow_factory() as uow:
            held = await self._held_permissions(uow, uid)
            decision = _role_decision(held, permission)

            override = await uow.overrides.get(uid, permission.id)
            decision = _apply_override(decision, override, permission.name)

            if tenant_id is not None:
                denial = await self._tenant_denial(uow, uid, tenant_id, permission, resource_type)
                if denial is not None:
                    decision = Decision.deny(denial, permission.name)

            if resource_id is not None:
                entry = await uow.records.get(uid, resource_type, resource_id)
                if entry is not None:
                    reason = ReasonCode.RECORD_GRANT if entry.granted else ReasonCode.RECORD_DENY
                    decision = Decision(entry.granted, reason, permission.name)

        return decision

    async def permissions_for(self, user_id: UUID) -> frozenset[str]:
        """Role-derived (or legacy) permission names, before overrides."""
        async with self._uow_factory() as uow:
            return await self._held_permissions(uow, user_id)

    async def _held_permissions(self, uow: UnitOfWork, user_id: UUID) -> frozenset[str]:
        if self._cache is None:
            expansion = await self._expand_roles(uow, user_id)
        else:
            generation = self._cache.generation(user_id)
            expansion = self._cache.get(user_id)
            if expansion is None:
                expansion = await self._expand_roles(uow, user_id)
                self._cache.put(user_id, expansion, generation)

        if expansion.has_roles or not self._legacy_fallback:
            return expansion.permission_names

        user = await uow.users.get_by_id(user_id)
        return legacy_permissions(user.legacy_role if user else None)

    async def _expand_roles(self, uow: UnitOfWork, user_id: UUID) -> CachedExpansion:
        roles = await uow.user_roles.list_roles_for_user(user_id)
        active_ids = [r.id for r in roles if r.is_active]
        permission_ids = await uow.roles.list_permission_ids(active_ids) if active_ids else set()
        return CachedExpansion(
            role_ids=frozenset(r.id for r in roles),
            permission_names=self.catalog.names_for_ids(permission_ids),
            has_roles=bool(roles),
        )

    async def _tenant_denial(
        self,
        uow: UnitOfWork,
        user_id: UUID,
        tenant_id: UUID,
        permission: Permission,
        resource_type: str,
    ) -> ReasonCode | None:
        membership = await uow.tenants.get(user_id, tenant_id)
        if membership is None:
            return ReasonCode.NOT_TENANT_MEMBER
        if membership.access_level == AccessLevel.READONLY:
            if permission.action not in self._readonly_actions:
                return ReasonCode.READONLY_TENANT
        elif membership.access_level == AccessLevel.LIMITED:
            allowed = self._limited_actions.get(
                resource_type, self._limited_actions.get(ANY_RESOURCE_TYPE, frozenset())
            )
            if permission.action not in allowed:
                return ReasonCode.LIMITED_TENANT
        elif membership.access_level != AccessLevel.FULL:
            # unrecognised level from the store: fail closed
            return ReasonCode.LIMITED_TENANT
        return None


def _coerce_user_id(user_id: UUID | str | None) -> UUID | None:
    if isinstance(user_id, UUID):
        return user_id
    if isinstance(user_id, str) and user_id.strip():
        try:
            return UUID(user_id.strip())
        except ValueError:
            return None
    return None


def _role_decision(held: frozenset[str], permission: Permission) -> Decision:
    if SYSTEM_ALL in held:
        return Decision.allow(ReasonCode.WILDCARD, permission.name)
    if permission.name in held:
        return Decision.allow(ReasonCode.ROLE_DERIVED, permission.name)
    if SYSTEM_ADMIN in held and implied_by_admin(permission):
        return Decision.allow(ReasonCode.ROLE_DERIVED, permission.name)
    return Decision.deny(ReasonCode.NO_PERMISSION, permission.name)


def _apply_override(
    decision: Decision, override: PermissionOverride | None, name: str
) -> Decision:
    if override is None:
        return decision
    if not override.granted:
        return Decision.deny(ReasonCode.EXPLICIT_DENY, name)
    if not decision.allowed:
        return Decision.allow(ReasonCode.EXPLICIT_GRANT, name)
    return decision
