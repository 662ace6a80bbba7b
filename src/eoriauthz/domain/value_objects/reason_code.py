"""Reason codes attached to every authorization decision."""

from enum import StrEnum


class ReasonCode(StrEnum):
    """Why a decision was reached. Logged by callers for audit."""

    WILDCARD = "wildcard"
    ROLE_DERIVED = "role-derived"
    EXPLICIT_GRANT = "explicit-grant"
    EXPLICIT_DENY = "explicit-deny"
    NO_PERMISSION = "no-permission"
    NOT_TENANT_MEMBER = "not-tenant-member"
    READONLY_TENANT = "readonly-tenant"
    LIMITED_TENANT = "limited-tenant"
    RECORD_GRANT = "record-grant"
    RECORD_DENY = "record-deny"
    CALLER_ERROR = "caller-error"
    UNKNOWN_PERMISSION = "unknown-permission"
