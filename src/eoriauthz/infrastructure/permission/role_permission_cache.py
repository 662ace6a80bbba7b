"""Optional in-process cache of role -> permission expansions.

Entries are keyed by user. Writers of user_role and role_permission must call
the invalidate methods in the same request that commits the change.

Readers take a generation before reading the store and hand it back to put();
an invalidation in between makes the put a no-op, so an expansion read before
a revoke can never be cached after it.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CachedExpansion:
    role_ids: frozenset[UUID]
    permission_names: frozenset[str]
    has_roles: bool


Generation = tuple[int, int]


class RolePermissionCache:
    """Per-user expansion cache with synchronous invalidation."""

    def __init__(self, max_entries: int = 10_000) -> None:
        self._entries: dict[UUID, CachedExpansion] = {}
        self._max_entries = max_entries
        # bumped by invalidate_role/clear: any in-flight read may include the role
        self._epoch = 0
        self._user_generations: dict[UUID, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def generation(self, user_id: UUID) -> Generation:
        return self._epoch, self._user_generations.get(user_id, 0)

    def get(self, user_id: UUID) -> CachedExpansion | None:
        return self._entries.get(user_id)

    def put(
        self, user_id: UUID, expansion: CachedExpansion, generation: Generation | None = None
    ) -> bool:
        """Store an expansion; returns False when it was read before an invalidation."""
        if generation is not None and generation != self.generation(user_id):
            return False
        if len(self._entries) >= self._max_entries and user_id not in self._entries:
            # drop the oldest insertion
            self._entries.pop(next(iter(self._entries)))
        self._entries[user_id] = expansion
        return True

    def invalidate_user(self, user_id: UUID) -> None:
        self._entries.pop(user_id, None)
        if len(self._user_generations) >= self._max_entries and user_id not in self._user_generations:
            self._user_generations.clear()
            self._epoch += 1
        self._user_generations[user_id] = self._user_generations.get(user_id, 0) + 1

    def invalidate_role(self, role_id: UUID) -> None:
        self._epoch += 1
        stale = [uid for uid, e in self._entries.items() if role_id in e.role_ids]
        for uid in stale:
            del self._entries[uid]

    def clear(self) -> None:
        self._epoch += 1
        self._entries.clear()
