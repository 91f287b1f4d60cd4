"""
Business logic for users.

The ``UserService`` keeps users in memory for the lifetime of the
process.  One instance is created per application by ``create_app``
and handed to request handlers through a FastAPI dependency; there is
no module-level state.  All operations take an internal re-entrant
lock, so the service may be shared between worker threads.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..core.exceptions import EmailConflictError, UserNotFoundError, UserValidationError
from ..schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class UserService:
    """In-memory store of users plus the ID allocator.

    IDs start at 1 and are never reused, even after a user has been
    deleted.  Emails are unique among stored users (exact,
    case-sensitive match).  Callers always receive copies of the
    stored records, so the only way to change a user is through
    ``update_user``.

    Parameters
    ----------
    clock : Optional[Callable[[], datetime]]
        Source of the current time used for ``created_at`` and
        ``updated_at``.  Defaults to timezone-aware UTC ``now``.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._clock = clock or _utcnow
        self._lock = threading.RLock()

    def list_users(self) -> List[User]:
        """Return all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id`` or raise ``UserNotFoundError``."""
        with self._lock:
            return self._require(user_id).model_copy()

    def create_user(self, data: UserCreate) -> User:
        """Store a new user and return it.

        Raises ``UserValidationError`` when the name or email is blank
        and ``EmailConflictError`` when the email is already taken.
        """
        if _is_blank(data.name) or _is_blank(data.email):
            logger.warning("Rejected user creation: name and email are required")
            raise UserValidationError()

        with self._lock:
            if self._email_taken(data.email):
                logger.warning("Rejected user creation: email %s already exists", data.email)
                raise EmailConflictError(data.email)

            now = self._clock()
            user = User(
                id=self._next_id,
                name=data.name,
                email=data.email,
                phone_number=data.phone_number,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._users.append(user)
            logger.info("Created user %s (%s)", user.id, user.email)
            return user.model_copy()

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply ``data`` to an existing user and return the result.

        Blank or missing ``name``/``email`` values are ignored.  A
        non-null ``phone_number`` always overwrites, even when empty.
        ``updated_at`` is refreshed on every successful call.  The
        record is left untouched when the update is rejected.
        """
        with self._lock:
            user = self._require(user_id)

            changes = {}
            if not _is_blank(data.name):
                changes["name"] = data.name
            if not _is_blank(data.email):
                if self._email_taken(data.email, exclude_id=user_id):
                    logger.warning(
                        "Rejected update of user %s: email %s already exists", user_id, data.email
                    )
                    raise EmailConflictError(data.email)
                changes["email"] = data.email
            if data.phone_number is not None:
                changes["phone_number"] = data.phone_number

            for key, value in changes.items():
                setattr(user, key, value)
            # Keep created_at <= updated_at even if the wall clock steps back.
            user.updated_at = max(self._clock(), user.created_at)
            logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(changes)) or "none")
            return user.model_copy()

    def delete_user(self, user_id: int) -> None:
        """Permanently remove a user or raise ``UserNotFoundError``."""
        with self._lock:
            user = self._require(user_id)
            self._users.remove(user)
            logger.info("Deleted user %s", user_id)

    def _find(self, user_id: int) -> Optional[User]:
        return next((user for user in self._users if user.id == user_id), None)

    def _require(self, user_id: int) -> User:
        user = self._find(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(user.email == email and user.id != exclude_id for user in self._users)
