"""Shared pytest fixtures for the Jarvis API tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from jarvis_api.app.core.config import Settings
from jarvis_api.app.main import create_app
from jarvis_api.app.services.user_service import UserService


class FakeClock:
    """Clock that moves forward by ``step`` every time it is read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(clock: FakeClock) -> UserService:
    return UserService(clock=clock)


@pytest.fixture
def client(service: UserService):
    app = create_app(settings=Settings(api_prefix=""), user_service=service)
    with TestClient(app) as test_client:
        yield test_client
