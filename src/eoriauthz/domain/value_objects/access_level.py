"""Tenant access levels."""

from enum import StrEnum


class AccessLevel(StrEnum):
    """How much a user may do inside a parish they belong to."""

    FULL = "full"
    READONLY = "readonly"
    LIMITED = "limited"
