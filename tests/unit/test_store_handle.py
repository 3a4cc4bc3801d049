import pytest

from usersvc.provider_states import PROVIDER_STATES, apply_state
from usersvc.storage.handle import StoreHandle
from usersvc.storage.storage import UserStore


def test_swap_returns_previous_and_replaces_current(store):
    handle = StoreHandle(store)
    replacement = UserStore()

    previous = handle.swap(replacement)

    assert previous is store
    assert handle.current is replacement


def test_swap_leaves_previous_store_untouched(store, sally):
    handle = StoreHandle(store)
    handle.swap(UserStore())
    assert store.by_id(10) == sally


def test_apply_state_sally_exists(sally):
    handle = StoreHandle(UserStore())
    apply_state(handle, "User sally exists")
    assert handle.current.by_id(10) == sally


def test_apply_state_sally_does_not_exist(store):
    handle = StoreHandle(store)
    apply_state(handle, "User sally does not exist")
    assert handle.current.get_users() == []


def test_apply_state_blocked_sally(store):
    handle = StoreHandle(store)
    apply_state(handle, "User is not authenticated")
    assert handle.current.by_username("sally").user_type == "blocked"


def test_apply_state_builds_fresh_stores():
    handle = StoreHandle(UserStore())
    first = apply_state(handle, "User sally exists")
    second = apply_state(handle, "User sally exists")
    assert first is not second


def test_apply_state_unknown():
    with pytest.raises(KeyError, match="Unknown provider state"):
        apply_state(StoreHandle(UserStore()), "User bob exists")


def test_known_states():
    assert set(PROVIDER_STATES) == {
        "User sally exists",
        "User sally does not exist",
        "User is not authenticated",
    }
