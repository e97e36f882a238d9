import uuid

import pytest

from users_api.app.schemas.user import UserCreate, UserUpdate
from users_api.app.services.user_service import (
    InvalidUserIdError,
    MissingFieldsError,
    UserNotFoundError,
    is_valid_user_id,
)


# -----------------------------
# Identifier validation
# -----------------------------
@pytest.mark.parametrize(
    "value",
    [
        "123e4567-e89b-12d3-a456-426614174000",
        "123E4567-E89B-12D3-A456-426614174000",
        str(uuid.uuid4()),
    ],
)
def test_valid_user_ids(value):
    assert is_valid_user_id(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not-a-uuid",
        "123e4567e89b12d3a456426614174000",
        "123e4567-e89b-12d3-a456-42661417400",
        "123e4567-e89b-12d3-a456-4266141740000",
        "g23e4567-e89b-12d3-a456-426614174000",
        " 123e4567-e89b-12d3-a456-426614174000",
    ],
)
def test_invalid_user_ids(value):
    assert not is_valid_user_id(value)


# -----------------------------
# Create
# -----------------------------
@pytest.mark.asyncio
async def test_create_assigns_id_and_default_hobbies(service, store):
    user = await service.create_user(UserCreate(username="alice", age=30))

    assert is_valid_user_id(user.id)
    assert user.hobbies == []
    assert store.get(user.id) is user


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"age": 30},
        {"username": "alice"},
        {"username": "", "age": 30},
        {"username": "alice", "age": 0},
        {"username": None, "age": None},
    ],
)
async def test_create_rejects_missing_fields(service, store, payload):
    with pytest.raises(MissingFieldsError):
        await service.create_user(UserCreate(**payload))
    assert len(store) == 0


@pytest.mark.asyncio
async def test_create_does_not_share_hobbies_list(service):
    hobbies = ["chess"]
    user = await service.create_user(UserCreate(username="bob", age=25, hobbies=hobbies))
    hobbies.append("go")
    assert user.hobbies == ["chess"]


# -----------------------------
# Get / update / delete
# -----------------------------
@pytest.mark.asyncio
async def test_invalid_id_checked_before_lookup(service):
    with pytest.raises(InvalidUserIdError):
        await service.get_user("not-a-uuid")
    with pytest.raises(InvalidUserIdError):
        await service.update_user("not-a-uuid", UserUpdate(age=5))
    with pytest.raises(InvalidUserIdError):
        await service.delete_user("not-a-uuid")


@pytest.mark.asyncio
async def test_unknown_id_is_not_found(service):
    missing = str(uuid.uuid4())
    with pytest.raises(UserNotFoundError):
        await service.get_user(missing)
    with pytest.raises(UserNotFoundError):
        await service.update_user(missing, UserUpdate(age=5))
    with pytest.raises(UserNotFoundError):
        await service.delete_user(missing)


@pytest.mark.asyncio
async def test_update_ignores_falsy_values(service):
    user = await service.create_user(UserCreate(username="bob", age=25, hobbies=["chess"]))

    updated = await service.update_user(user.id, UserUpdate(username="", age=0, hobbies=[]))

    assert updated.username == "bob"
    assert updated.age == 25
    assert updated.hobbies == ["chess"]


@pytest.mark.asyncio
async def test_update_overwrites_truthy_values_in_place(service, store):
    user = await service.create_user(UserCreate(username="bob", age=25))

    updated = await service.update_user(user.id, UserUpdate(age=26, hobbies=["go"]))

    assert updated is store.get(user.id)
    assert updated.id == user.id
    assert updated.username == "bob"
    assert updated.age == 26
    assert updated.hobbies == ["go"]


@pytest.mark.asyncio
async def test_delete_removes_record(service, store):
    user = await service.create_user(UserCreate(username="carol", age=41))

    await service.delete_user(user.id)

    assert user.id not in store
    assert await service.list_users() == []
