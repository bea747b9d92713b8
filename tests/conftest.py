"""Pytest configuration and shared fixtures.

Fixtures build real in-memory stores and a cheap argon2 configuration, so
unit and API tests run without Postgres, Redis or a mail provider.
"""

import asyncio
from unittest.mock import Mock

import pytest

from warden.core.config import Settings
from warden.core.enums import Environment
from warden.core.result import Result, Success
from warden.domain.value_objects import Email
from warden.infrastructure.persistence.memory import (
    InMemoryBannedTokenStore,
    InMemoryTwoFACodeStore,
    InMemoryUserStore,
)
from warden.infrastructure.security import Argon2PasswordService, JWTService

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-characters"


class RecordingNotifier:
    """Notifier test double that keeps every message it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[tuple[Email, str, str]] = []

    async def send(self, recipient: Email, subject: str, body: str) -> Result:
        self.sent.append((recipient, subject, body))
        return Success(value=None)

    @property
    def last_code(self) -> str:
        """Six-digit code from the most recent message."""
        _, _, body = self.sent[-1]
        return body.rsplit(": ", 1)[1]


@pytest.fixture
def settings() -> Settings:
    """Testing settings with cheap argon2 parameters."""
    return Settings(
        environment=Environment.TESTING,
        secret_key=TEST_SECRET_KEY,
        argon2_memory_cost=1024,
        argon2_time_cost=2,
        argon2_parallelism=1,
        password_hash_workers=2,
    )


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double; bind() returns the same mock so calls are observable."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def password_service():
    service = Argon2PasswordService(memory_cost=1024, time_cost=2, max_workers=2)
    yield service
    service.shutdown()


@pytest.fixture
def user_store(password_service) -> InMemoryUserStore:
    return InMemoryUserStore(password_service)


@pytest.fixture
def two_fa_code_store() -> InMemoryTwoFACodeStore:
    return InMemoryTwoFACodeStore(ttl_seconds=600)


@pytest.fixture
def banned_token_store() -> InMemoryBannedTokenStore:
    return InMemoryBannedTokenStore(ttl_seconds=600, min_ttl_seconds=600)


@pytest.fixture
def token_service(banned_token_store) -> JWTService:
    return JWTService(
        secret_key=TEST_SECRET_KEY,
        banned_token_store=banned_token_store,
        ttl_seconds=600,
    )


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP endpoint tests")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
