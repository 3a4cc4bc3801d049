"""
Store factory – pick the initial user seed from config (lazy env version)
=======================================================================

Centralizes how the provider's store is seeded at startup so the app factory
stays ignorant of where the seed comes from.

- Reads environment **at call time** to avoid stale values in tests.
- The store is always in-memory; only the seed varies.

Environment variables
---------------------
- USERSVC_SEED: "default" (sally), "empty", or a path to a JSON file holding
  an array of users in wire shape.
"""

from typing import List, Optional
import json
import logging
import os

from pydantic import TypeAdapter, ValidationError

from usersvc.models import User
from usersvc.provider_states import sally_does_not_exist, sally_exists
from usersvc.storage.storage import UserStore

log = logging.getLogger("usersvc.storage")

_USER_LIST = TypeAdapter(List[User])


def load_seed_file(path: str) -> UserStore:
    """
    Build a store from a JSON seed file.

    Raises:
        ValueError: If the file is missing, not JSON, or not an array of users.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise ValueError(f"Cannot read seed file {path!r}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Seed file {path!r} is not valid JSON: {exc}") from exc

    try:
        users = _USER_LIST.validate_python(raw)
    except ValidationError as exc:
        raise ValueError(f"Seed file {path!r} does not hold a list of users") from exc
    return UserStore(users)


def get_store(seed: Optional[str] = None) -> UserStore:
    """
    Return the initial store based on configuration.

    Parameters
    ----------
    seed : str, optional
        "default", "empty" or a JSON file path. If omitted, reads USERSVC_SEED.
    """
    choice = (seed or os.getenv("USERSVC_SEED", "default")).strip()
    log.info("Selected user seed: %r", choice)

    if choice.lower() == "default":
        return sally_exists()
    if choice.lower() == "empty":
        return sally_does_not_exist()
    if choice.endswith(".json"):
        return load_seed_file(choice)

    raise ValueError(f"Unknown user seed: {choice!r}")
