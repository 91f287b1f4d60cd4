"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from jarvis_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` owned by the running application."""
    return request.app.state.user_service
