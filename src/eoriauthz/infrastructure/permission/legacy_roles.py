"""Compatibility adapter for accounts created before RBAC.

Accounts with no user_role rows still carry a single ``role`` column. This
module maps that value to a fixed permission set, which then goes through the
same override, tenant and record checks as a role-derived set. Delete it (and
the ``legacy_role_fallback`` setting) once every account has been migrated.
"""

from eoriauthz.domain.value_objects import LegacyRole

_CRUD = ("create", "read", "update")

_PAROH = frozenset(
    ["users.read"]
    + [f"documents.{a}" for a in (*_CRUD, "approve", "export")]
    + [f"cemetery.{a}" for a in (*_CRUD, "export")]
    + [f"concessions.{a}" for a in (*_CRUD, "renew")]
    + [f"accounting.{a}" for a in (*_CRUD, "approve", "export")]
    + [f"accounting.invoices.{a}" for a in ("view", *_CRUD, "export")]
    + [f"inventory.{a}" for a in (*_CRUD, "transfer")]
    + [f"sales.{a}" for a in _CRUD]
    + [f"library.{a}" for a in (*_CRUD, "loan")]
    + [f"fleet.{a}" for a in _CRUD]
    + [f"assets.{a}" for a in _CRUD]
    + [f"hr.{a}" for a in (*_CRUD, "approve_leave")]
    + [f"partners.{a}" for a in _CRUD]
    + ["reports.view", "reports.export", "settings.read", "settings.update"]
)

LEGACY_ROLE_PERMISSIONS: dict[LegacyRole, frozenset[str]] = {
    LegacyRole.EPISCOP: frozenset({"system.all"}),
    LegacyRole.VICAR: _PAROH
    | {"system.admin", "users.create", "users.update", "users.approve", "inventory.export"},
    LegacyRole.PAROH: _PAROH,
    LegacyRole.SECRETAR: frozenset(
        [f"documents.{a}" for a in (*_CRUD, "export")]
        + [f"partners.{a}" for a in _CRUD]
        + ["reports.view"]
    ),
    LegacyRole.CONTABIL: frozenset(
        [f"accounting.{a}" for a in (*_CRUD, "export")]
        + [f"accounting.invoices.{a}" for a in ("view", *_CRUD, "export")]
        + ["concessions.read", "concessions.update", "sales.read", "inventory.read"]
        + ["partners.read", "partners.update", "reports.view", "reports.export"]
    ),
}


def legacy_permissions(legacy_role: LegacyRole | str | None) -> frozenset[str]:
    """Synthetic permission names for a legacy role value; empty when unknown."""
    if legacy_role is None:
        return frozenset()
    try:
        role = LegacyRole(legacy_role)
    except ValueError:
        return frozenset()
    return LEGACY_ROLE_PERMISSIONS.get(role, frozenset())
