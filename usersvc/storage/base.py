"""
Base store interface for the user service.

Purpose:
    Define the small read-only contract the HTTP handlers depend on, so the
    in-memory store can be replaced wholesale (per scenario, per test) without
    touching handler code.

Testing & Coverage:
    Abstract declarations are annotated with `# pragma: no cover`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from usersvc.models import User


class BaseUserStore(ABC):
    """Abstract base class for user stores."""

    @abstractmethod  # pragma: no cover
    def get_users(self) -> List[User]:
        """Return every user, in store iteration order."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def by_username(self, username: str) -> Optional[User]:
        """Return the user keyed by `username`, or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def by_id(self, user_id: int) -> Optional[User]:
        """
        Return the first user whose ID equals `user_id`, or None.

        IDs are not a key of the store; implementations scan.
        """
        raise NotImplementedError
