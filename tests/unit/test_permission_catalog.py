"""Unit tests for PermissionCatalog."""

from uuid import uuid4

import pytest

from eoriauthz.domain.entities import Permission
from eoriauthz.domain.exceptions import UnknownPermission
from eoriauthz.domain.permission_catalog import (
    PermissionCatalog,
    covers_resource,
    implied_by_admin,
    split_permission_name,
)


def _perm(resource: str, action: str) -> Permission:
    return Permission(id=uuid4(), resource=resource, action=action, name=f"{resource}.{action}")


@pytest.fixture
def small_catalog() -> PermissionCatalog:
    return PermissionCatalog(
        [
            _perm("accounting.invoices", "update"),
            _perm("sales.invoices", "read"),
            _perm("accounting.invoices", "read"),
            _perm("partners", "read"),
            _perm("users", "update"),
        ],
        {
            "invoice": "accounting.invoices",
            "transaction": "accounting",
            "partner": "partners",
            "user": "users",
        },
    )


def test_exact_name_wins(small_catalog: PermissionCatalog) -> None:
    assert small_catalog.resolve_name("partners.read").name == "partners.read"


def test_unique_suffix_resolves(small_catalog: PermissionCatalog) -> None:
    assert small_catalog.resolve_name("invoices.update").name == "accounting.invoices.update"


def test_ambiguous_suffix_is_unknown(small_catalog: PermissionCatalog) -> None:
    with pytest.raises(UnknownPermission, match="Ambiguous"):
        small_catalog.resolve_name("invoices.read")


def test_suffix_must_align_on_dot(small_catalog: PermissionCatalog) -> None:
    with pytest.raises(UnknownPermission):
        small_catalog.resolve_name("voices.update")


def test_resolve_checks_resource_category(small_catalog: PermissionCatalog) -> None:
    assert small_catalog.resolve("invoices.update", "invoice").resource == "accounting.invoices"
    with pytest.raises(UnknownPermission):
        small_catalog.resolve("partners.read", "invoice")


def test_category_covers_sub_resources_only(small_catalog: PermissionCatalog) -> None:
    assert small_catalog.resolve("invoices.update", "transaction").name == "accounting.invoices.update"
    assert covers_resource("hr", "hr.employees")
    assert not covers_resource("documents", "hr.documents")
    assert not covers_resource("hr", "hrx.employees")


def test_resolve_unknown_resource_type(small_catalog: PermissionCatalog) -> None:
    with pytest.raises(UnknownPermission, match="resource type"):
        small_catalog.resolve("partners.read", "vendor")


def test_iteration_is_sorted_and_readonly(small_catalog: PermissionCatalog) -> None:
    names = [p.name for p in small_catalog]
    assert names == sorted(names)
    assert len(small_catalog) == 5
    assert "users.update" in small_catalog
    with pytest.raises(TypeError):
        small_catalog.resource_types["vendor"] = "partners"


def test_names_for_ids_ignores_unknown(small_catalog: PermissionCatalog) -> None:
    known = small_catalog.get("users.update")
    assert small_catalog.names_for_ids([known.id, uuid4()]) == frozenset({"users.update"})
    assert small_catalog.get_by_id(known.id) is known


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        PermissionCatalog([_perm("users", "read"), _perm("users", "read")])


def test_inconsistent_name_rejected() -> None:
    bad = Permission(id=uuid4(), resource="users", action="read", name="users.write")
    with pytest.raises(ValueError):
        PermissionCatalog([bad])


def test_split_permission_name() -> None:
    assert split_permission_name("accounting.invoices.update") == ("accounting.invoices", "update")
    with pytest.raises(UnknownPermission):
        split_permission_name("update")


def test_implied_by_admin() -> None:
    assert implied_by_admin(_perm("users", "delete"))
    assert implied_by_admin(_perm("sessions", "manage"))
    assert not implied_by_admin(_perm("accounting", "approve"))


def test_seed_catalog_covers_every_resource_type(catalog: PermissionCatalog) -> None:
    resources = {p.resource for p in catalog}
    for rtype, category in catalog.resource_types.items():
        assert category in resources, rtype
