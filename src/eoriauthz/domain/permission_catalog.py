"""Immutable permission catalog snapshot.

Loaded once at process start (from the seed payload or the permission table)
and passed explicitly to the resolver. Nothing in it changes at runtime.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from uuid import UUID

from eoriauthz.domain.entities import Permission
from eoriauthz.domain.exceptions import UnknownPermission

SYSTEM_ALL = "system.all"
SYSTEM_ADMIN = "system.admin"

# Resources whose every action is implied by system.admin.
ADMIN_RESOURCES = frozenset({"users", "roles", "permissions", "settings", "sessions", "reports"})


def permission_name(resource: str, action: str) -> str:
    """Dotted permission name."""
    return f"{resource}.{action}"


def split_permission_name(name: str) -> tuple[str, str]:
    """Split ``resource.action``; the action is the last segment."""
    resource, sep, action = name.rpartition(".")
    if not sep or not resource or not action:
        raise UnknownPermission(f"Malformed permission name: {name!r}")
    return resource, action


class PermissionCatalog:
    """Read-only registry of permissions keyed by name, plus resource types.

    resource_types maps a record type used by callers (``invoice``) to the
    permission resource category it belongs to (``accounting.invoices``). A
    category also covers its sub-resources: ``hr`` covers ``hr.employees``.
    """

    __slots__ = ("_by_name", "_by_id", "_resource_types")

    def __init__(
        self,
        permissions: Iterable[Permission],
        resource_types: Mapping[str, str] | None = None,
    ) -> None:
        by_name: dict[str, Permission] = {}
        for p in permissions:
            if p.name != permission_name(p.resource, p.action):
                raise ValueError(f"Permission name {p.name!r} does not match {p.resource}.{p.action}")
            if p.name in by_name:
                raise ValueError(f"Duplicate permission name: {p.name}")
            by_name[p.name] = p
        self._by_name = MappingProxyType(by_name)
        self._by_id = MappingProxyType({p.id: p for p in by_name.values()})
        self._resource_types = MappingProxyType(dict(resource_types or {}))

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Permission]:
        return iter(sorted(self._by_name.values(), key=lambda p: p.name))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def resource_types(self) -> Mapping[str, str]:
        return self._resource_types

    def get(self, name: str) -> Permission | None:
        return self._by_name.get(name)

    def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self._by_id.get(permission_id)

    def names_for_ids(self, permission_ids: Iterable[UUID]) -> frozenset[str]:
        """Map bound permission ids to names, ignoring ids unknown to this snapshot."""
        return frozenset(
            self._by_id[pid].name for pid in permission_ids if pid in self._by_id
        )

    def resolve_name(self, name: str) -> Permission:
        """Find a permission by exact name, or by unique module-qualified suffix.

        ``invoices.update`` resolves to ``accounting.invoices.update`` when that
        is the only catalog entry ending in ``.invoices.update``.
        """
        if not name:
            raise UnknownPermission("Empty permission name")
        exact = self._by_name.get(name)
        if exact is not None:
            return exact
        suffix = "." + name
        matches = [p for n, p in self._by_name.items() if n.endswith(suffix)]
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise UnknownPermission(f"Ambiguous permission name: {name!r}")
        raise UnknownPermission(f"Unknown permission: {name!r}")

    def resolve(self, action: str, resource_type: str) -> Permission:
        """Resolve a requested action against a resource type.

        Raises UnknownPermission for unregistered resource types and for
        permissions that belong to a different resource category.
        """
        category = self._resource_types.get(resource_type)
        if category is None:
            raise UnknownPermission(f"Unknown resource type: {resource_type!r}")
        permission = self.resolve_name(action)
        if not covers_resource(category, permission.resource):
            raise UnknownPermission(
                f"Permission {permission.name!r} does not apply to resource type {resource_type!r}"
            )
        return permission


def covers_resource(category: str, resource: str) -> bool:
    """True when a permission on resource applies to records of category."""
    return resource == category or resource.startswith(category + ".")


def implied_by_admin(permission: Permission) -> bool:
    """True when system.admin covers the permission."""
    return permission.resource.split(".", 1)[0] in ADMIN_RESOURCES
