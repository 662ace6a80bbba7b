"""Single-role enum stored on accounts created before RBAC."""

from enum import StrEnum


class LegacyRole(StrEnum):
    """Pre-RBAC user role column values."""

    EPISCOP = "episcop"
    VICAR = "vicar"
    PAROH = "paroh"
    SECRETAR = "secretar"
    CONTABIL = "contabil"
