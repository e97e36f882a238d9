from users_api.app.core.store import UserStore
from users_api.app.schemas.user import User


def make_user(user_id, username="alice"):
    return User(id=user_id, username=username, age=30, hobbies=[])


def test_get_missing_returns_none():
    assert UserStore().get("anything") is None


def test_set_get_delete():
    store = UserStore()
    user = make_user("a")
    store.set("a", user)

    assert store.get("a") is user
    assert "a" in store
    assert len(store) == 1

    store.delete("a")
    assert store.get("a") is None
    assert "a" not in store


def test_delete_missing_is_noop():
    store = UserStore()
    store.delete("nope")
    assert len(store) == 0


def test_values_keep_insertion_order():
    store = UserStore()
    for user_id in ("c", "a", "b"):
        store.set(user_id, make_user(user_id, username=user_id))

    assert [u.id for u in store.values()] == ["c", "a", "b"]


def test_values_is_a_snapshot():
    store = UserStore()
    store.set("a", make_user("a"))
    snapshot = store.values()
    store.delete("a")
    assert len(snapshot) == 1
