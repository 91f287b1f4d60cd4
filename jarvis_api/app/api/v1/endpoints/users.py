"""
User endpoints for API v1.

Provide listing, lookup, creation, update and deletion of users.  The
handlers are thin: they forward to ``UserService`` and let the
application-wide exception handler turn service errors into
``{"message": ...}`` responses.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from jarvis_api.app.api.deps import get_user_service
from jarvis_api.app.schemas.common import ErrorMessage
from jarvis_api.app.schemas.user import User, UserCreate, UserUpdate
from jarvis_api.app.services.user_service import UserService


router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorMessage, "description": "User not found"}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage, "description": "Invalid user data"}}


@router.get("", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users in the order they were created."""
    return service.list_users()


@router.get("/{user_id}", response_model=User, responses=NOT_FOUND_RESPONSE)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    """Return a single user by ID."""
    return service.get_user(user_id)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_user(
    user_in: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a new user.

    ``name`` and ``email`` are required and the email must not be in
    use.  The ``Location`` header of the response points at the new
    user.
    """
    user = service.create_user(user_in)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put(
    "/{user_id}",
    response_model=User,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update an existing user.

    Blank ``name``/``email`` values are ignored; ``phoneNumber`` is
    overwritten whenever it is not null.
    """
    return service.update_user(user_id, user_in)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user by ID."""
    service.delete_user(user_id)
    return None
