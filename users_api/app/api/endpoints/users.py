"""
User endpoints.

Provide listing, retrieval, creation, partial update and deletion of
users.  Identifiers travel as plain strings so that malformed ids are
answered with the API's own 400 message rather than a validation
error.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from users_api.app.schemas.user import User, UserCreate, UserUpdate
from users_api.app.services.user_service import (
    InvalidUserIdError,
    MissingFieldsError,
    UserNotFoundError,
    UserService,
)

router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Return the service bound to the running application."""
    return request.app.state.user_service


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, InvalidUserIdError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid userId")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


# Both "" and "/" are routed so that ``/api/users/`` behaves like
# ``/api/users``.
@router.api_route("", methods=["GET", "HEAD"], response_model=List[User])
@router.api_route("/", methods=["GET", "HEAD"], response_model=List[User], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return every user currently stored."""
    return await service.list_users()


@router.api_route("/{user_id}", methods=["GET", "HEAD"], response_model=User)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    """Retrieve a single user by ID.

    Returns HTTP 400 for a malformed id and HTTP 404 if the user is
    not found.
    """
    try:
        return await service.get_user(user_id)
    except (InvalidUserIdError, UserNotFoundError) as e:
        raise _http_error(e) from e


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_user(
    payload: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a new user.

    ``username`` and ``age`` are required; ``hobbies`` defaults to an
    empty list.  The server assigns the ``id``.
    """
    try:
        return await service.create_user(payload or UserCreate())
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields") from e


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update a user's username, age or hobbies.

    Fields that are absent or falsy keep their stored value.
    """
    try:
        return await service.update_user(user_id, payload or UserUpdate())
    except (InvalidUserIdError, UserNotFoundError) as e:
        raise _http_error(e) from e


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user by ID."""
    try:
        await service.delete_user(user_id)
    except (InvalidUserIdError, UserNotFoundError) as e:
        raise _http_error(e) from e
    return None
