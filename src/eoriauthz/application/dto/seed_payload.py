"""Seed payload - catalog, default roles and role-permission bindings."""

import json
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from eoriauthz.domain.permission_catalog import covers_resource


class PermissionSeed(BaseModel):
    resource: str = Field(min_length=1)
    action: str = Field(min_length=1)
    display_name: str | None = None

    @property
    def name(self) -> str:
        return f"{self.resource}.{self.action}"


class RoleSeed(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    display_name: str | None = None
    description: str | None = None


class SeedPayload(BaseModel):
    """Static configuration payload loaded once at startup."""

    permissions: list[PermissionSeed]
    roles: list[RoleSeed] = Field(default_factory=list)
    role_permissions: dict[str, list[str]] = Field(default_factory=dict)
    resource_types: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_references(self) -> "SeedPayload":
        names = [p.name for p in self.permissions]
        if len(names) != len(set(names)):
            raise ValueError("duplicate permission in seed payload")
        known = set(names)
        roles = {r.name for r in self.roles}
        for role_name, perm_names in self.role_permissions.items():
            if role_name not in roles:
                raise ValueError(f"role_permissions references unknown role {role_name!r}")
            missing = [n for n in perm_names if n not in known]
            if missing:
                raise ValueError(f"role {role_name!r} references unknown permissions {missing}")
        categories = {p.resource for p in self.permissions}
        for rtype, category in self.resource_types.items():
            if not any(covers_resource(category, c) for c in categories):
                raise ValueError(f"resource type {rtype!r} maps to unknown category {category!r}")
        return self


def load_seed_payload(path: str | Path | None = None) -> SeedPayload:
    """Read and validate a seed payload; the packaged default when path is None."""
    if path is None:
        raw = resources.files("eoriauthz.seed").joinpath("rbac.json").read_text(encoding="utf-8")
    else:
        raw = Path(path).read_text(encoding="utf-8")
    return SeedPayload.model_validate(json.loads(raw))
