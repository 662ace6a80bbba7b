"""Session validation outcome."""

from enum import StrEnum


class SessionStatus(StrEnum):
    VALID = "valid"
    EXPIRED = "expired"
    NOT_FOUND = "not_found"
