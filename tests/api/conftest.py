"""API test fixtures.

Each test gets a fresh application built from testing settings with
in-memory stores. The login handler is rebuilt around a RecordingNotifier so
tests can read the emailed 2FA code.
"""

import pytest
from fastapi.testclient import TestClient

from warden.application.commands.handlers import LoginUserHandler
from warden.core.container import get_login_handler
from warden.main import create_app


@pytest.fixture
def app(settings, recording_notifier):
    app = create_app(settings)
    container = app.state.container
    login_handler = LoginUserHandler(
        user_store=container.user_store,
        two_fa_code_store=container.two_fa_code_store,
        token_service=container.token_service,
        notifier=recording_notifier,
        logger=container.logger,
    )
    app.dependency_overrides[get_login_handler] = lambda: login_handler
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
