"""
In-memory user store.

Responsibilities:
    - Hold the seeded set of users keyed by username
    - Look users up by username (O(1)) or by numeric ID (scan)
    - List all users

Design:
    - Seeded once at construction and never mutated afterwards, so concurrent
      readers need no locking. Scenario changes replace the whole store through
      a StoreHandle instead of editing this one.
    - ID uniqueness is not enforced. `by_id` returns the first match in
      insertion order, which makes duplicate IDs deterministic.

LLM Prompt Example:
    "Explain why a read-only, seed-once store can be shared across request
     workers without locks, and how replacing it wholesale keeps readers safe."
"""

from typing import Dict, Iterable, List, Optional

from usersvc.models import User

from .base import BaseUserStore


class UserStore(BaseUserStore):
    def __init__(self, users: Iterable[User] = ()):
        """
        Build the store from a seed of users.

        Internal schema:
            self._users = {username: User}

        Raises:
            ValueError: If two seeded users share a username.
        """
        self._users: Dict[str, User] = {}
        for user in users:
            if user.username in self._users:
                raise ValueError(f"Duplicate username in seed: {user.username!r}")
            self._users[user.username] = user

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def get_users(self) -> List[User]:
        return list(self._users.values())

    def by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def by_id(self, user_id: int) -> Optional[User]:
        """
        Scan for a user with the given ID.

        Returns:
            Optional[User]: First match in insertion order, or None.
        """
        for user in self._users.values():
            if user.id == user_id:
                return user
        return None
