"""User repository port - only what authorization needs."""

from typing import Protocol
from uuid import UUID

from eoriauthz.domain.entities import AppUser


class UserRepository(Protocol):
    async def get_by_id(self, user_id: UUID) -> AppUser | None: ...
