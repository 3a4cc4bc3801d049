"""
Unit tests for the in-memory UserStore.

Covers:
    - by_id (hit, miss, duplicate IDs resolve to first inserted)
    - by_username (hit, miss)
    - get_users (empty, populated, insertion order)
    - seed validation (duplicate usernames rejected)
"""

import pytest

from usersvc.models import User
from usersvc.storage.storage import UserStore


def make_user(user_id, username, user_type="admin"):
    return User(id=user_id, username=username, first_name="F", last_name="L", user_type=user_type)


@pytest.fixture
def two_users():
    return UserStore([make_user(1, "alice"), make_user(2, "bob")])


def test_by_id_found(two_users):
    user = two_users.by_id(2)
    assert user is not None
    assert user.username == "bob"


def test_by_id_missing(two_users):
    assert two_users.by_id(99) is None


def test_by_id_zero_matches_nothing_in_default_seed(store):
    assert store.by_id(0) is None


def test_by_id_duplicate_ids_returns_first_inserted():
    """
    IDs are not a key of the store; a duplicate resolves to the first user
    in insertion order, every time.
    """
    store = UserStore([make_user(7, "first"), make_user(7, "second")])
    assert store.by_id(7).username == "first"
    assert store.by_id(7).username == "first"


def test_by_username(two_users):
    assert two_users.by_username("alice").id == 1
    assert two_users.by_username("carol") is None


def test_get_users_empty():
    assert UserStore().get_users() == []


def test_get_users_preserves_insertion_order(two_users):
    assert [u.username for u in two_users.get_users()] == ["alice", "bob"]


def test_get_users_returns_copy(two_users):
    users = two_users.get_users()
    users.clear()
    assert len(two_users) == 2


def test_duplicate_username_rejected():
    with pytest.raises(ValueError, match="Duplicate username"):
        UserStore([make_user(1, "alice"), make_user(2, "alice")])


def test_len_and_contains(two_users):
    assert len(two_users) == 2
    assert "alice" in two_users
    assert "carol" not in two_users


def test_seeded_store_holds_sally(store, sally):
    assert store.by_id(10) == sally
    assert store.by_username("sally").last_name == "de La Beaujardière😀😍"
