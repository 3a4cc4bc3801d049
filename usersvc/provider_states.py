"""
Named provider states.

Each state builds a fresh store describing one scenario the provider must be
able to serve. Switching scenario means swapping the app's StoreHandle to the
store a state builds, never editing the live store.

    >>> apply_state(app.state.store_handle, "User sally does not exist")
"""

from typing import Callable, Dict

from usersvc.models import User
from usersvc.storage.handle import StoreHandle
from usersvc.storage.storage import UserStore

SALLY = User(
    id=10,
    username="sally",
    first_name="Jean-Marie",
    last_name="de La Beaujardière😀😍",
    user_type="admin",
)


def sally_exists() -> UserStore:
    return UserStore([SALLY])


def sally_does_not_exist() -> UserStore:
    return UserStore()


def sally_blocked() -> UserStore:
    return UserStore([SALLY.model_copy(update={"user_type": "blocked"})])


PROVIDER_STATES: Dict[str, Callable[[], UserStore]] = {
    "User sally exists": sally_exists,
    "User sally does not exist": sally_does_not_exist,
    "User is not authenticated": sally_blocked,
}


def apply_state(handle: StoreHandle, name: str) -> UserStore:
    """
    Swap `handle` to a fresh store for the named state.

    Raises:
        KeyError: If the state name is unknown.
    """
    try:
        builder = PROVIDER_STATES[name]
    except KeyError:
        raise KeyError(f"Unknown provider state: {name!r}") from None
    store = builder()
    handle.swap(store)
    return store
