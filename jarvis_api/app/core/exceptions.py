"""
Error types raised by the user service.

Every failure the service can report is a subclass of
``UserServiceError``.  Each class knows the HTTP status it maps to so
the application can translate it into a ``{"message": ...}`` response
in a single exception handler.  The base class derives from
``ValueError`` because all of these errors are caused by caller input.
"""

from fastapi import status


class UserServiceError(ValueError):
    """Base class for recoverable user service failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserValidationError(UserServiceError):
    """A required field (name or email) is missing or blank."""

    def __init__(self, message: str = "Name and Email are required") -> None:
        super().__init__(message)


class EmailConflictError(UserServiceError):
    """Another stored user already owns the requested email."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already exists")
        self.email = email


class UserNotFoundError(UserServiceError):
    """No user with the requested ID exists."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id
