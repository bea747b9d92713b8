"""API tests for the session endpoints.

Tests cover the full flows through HTTP:
- Signup (201, 400, 409, 422)
- Login without 2FA (200 + cookie) and with 2FA (206 + verify)
- Logout revokes the cookie credential
- Verify-token for resource servers
"""

import pytest

PASSWORD = "Passw0rd!"


def signup(client, email="alice@example.com", password=PASSWORD, requires_2fa=False):
    return client.post(
        "/signup",
        json={"email": email, "password": password, "requires2FA": requires_2fa},
    )


def login(client, email="alice@example.com", password=PASSWORD):
    return client.post("/login", json={"email": email, "password": password})


def verify_2fa(client, login_attempt_id, code, email="alice@example.com"):
    return client.post(
        "/verify-2fa",
        json={"email": email, "loginAttemptId": login_attempt_id, "2FACode": code},
    )


@pytest.mark.api
class TestSignup:
    """Test POST /signup."""

    def test_signup_created(self, client):
        response = signup(client)

        assert response.status_code == 201
        assert response.json() == {"message": "User created successfully!"}

    def test_duplicate_email_conflict(self, client):
        signup(client)

        response = signup(client, email="ALICE@example.com")

        assert response.status_code == 409
        assert response.json()["detail"] == "User already exists"

    def test_seven_character_password_rejected(self, client):
        response = signup(client, password="Abc12!x")

        assert response.status_code == 400
        body = response.json()
        assert body["errors"][0]["field"] == "password"
        assert body["errors"][0]["message"] == (
            "Password must be at least 8 characters long."
        )

    def test_eight_character_password_accepted(self, client):
        assert signup(client, password="Abc12!xy").status_code == 201

    def test_invalid_email_rejected(self, client):
        response = signup(client, email="not-an-email")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "email"

    def test_missing_field_is_unprocessable(self, client):
        response = client.post(
            "/signup", json={"email": "alice@example.com", "password": PASSWORD}
        )

        assert response.status_code == 422
        assert PASSWORD not in response.text


@pytest.mark.api
class TestLogin:
    """Test POST /login without a second factor."""

    def test_login_sets_cookie(self, client):
        signup(client)

        response = login(client)

        assert response.status_code == 200
        assert response.json() == {"message": "Login successful"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("jwt=")
        assert "HttpOnly" in set_cookie
        assert "samesite=lax" in set_cookie.lower()
        assert client.cookies.get("jwt")

    def test_email_is_case_insensitive(self, client):
        signup(client)

        assert login(client, email="Alice@Example.COM").status_code == 200

    def test_unknown_user_and_wrong_password_look_alike(self, client):
        signup(client)

        unknown = login(client, email="bob@example.com")
        wrong = login(client, password="Passw0rd?")

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json()["detail"] == wrong.json()["detail"]
        assert "jwt" not in client.cookies

    def test_policy_invalid_password_is_bad_request(self, client):
        signup(client)

        assert login(client, password="short").status_code == 400

    def test_malformed_body(self, client):
        response = client.post("/login", json={"email": "alice@example.com"})

        assert response.status_code == 422


@pytest.mark.api
class TestTwoFactorLogin:
    """Test POST /login and POST /verify-2fa for 2FA accounts."""

    @pytest.fixture(autouse=True)
    def two_fa_user(self, client):
        signup(client, requires_2fa=True)

    def test_login_requires_second_factor(self, client, recording_notifier):
        response = login(client)

        assert response.status_code == 206
        body = response.json()
        assert body["message"] == "2FA required"
        assert body["loginAttemptId"]
        assert "jwt" not in client.cookies
        recipient, subject, _ = recording_notifier.sent[-1]
        assert recipient.value == "alice@example.com"
        assert subject == "Your 2FA code"

    def test_correct_code_sets_cookie(self, client, recording_notifier):
        attempt_id = login(client).json()["loginAttemptId"]

        response = verify_2fa(client, attempt_id, recording_notifier.last_code)

        assert response.status_code == 200
        assert client.cookies.get("jwt")

    def test_wrong_code_is_unauthorized(self, client, recording_notifier):
        attempt_id = login(client).json()["loginAttemptId"]
        code = recording_notifier.last_code
        wrong = "000000" if code != "000000" else "111111"

        response = verify_2fa(client, attempt_id, wrong)

        assert response.status_code == 401

    def test_code_cannot_be_replayed(self, client, recording_notifier):
        attempt_id = login(client).json()["loginAttemptId"]
        code = recording_notifier.last_code
        verify_2fa(client, attempt_id, code)

        response = verify_2fa(client, attempt_id, code)

        assert response.status_code == 401

    def test_second_login_invalidates_first_challenge(
        self, client, recording_notifier
    ):
        first_id = login(client).json()["loginAttemptId"]
        first_code = recording_notifier.last_code
        second_id = login(client).json()["loginAttemptId"]
        second_code = recording_notifier.last_code

        assert verify_2fa(client, first_id, first_code).status_code == 401
        assert verify_2fa(client, second_id, second_code).status_code == 200

    def test_malformed_code_is_bad_request(self, client):
        attempt_id = login(client).json()["loginAttemptId"]

        response = verify_2fa(client, attempt_id, "12ab56")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "2FACode"


@pytest.mark.api
class TestLogoutAndVerifyToken:
    """Test POST /logout and POST /verify-token."""

    @pytest.fixture
    def token(self, client) -> str:
        signup(client)
        login(client)
        return client.cookies.get("jwt")

    def test_verify_token_returns_subject(self, client, token):
        response = client.post("/verify-token", json={"token": token})

        assert response.status_code == 200
        assert response.json() == {"subject": "alice@example.com"}

    def test_logout_revokes_token(self, client, token):
        response = client.post("/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully logged out."}
        assert "jwt" not in client.cookies
        verify = client.post("/verify-token", json={"token": token})
        assert verify.status_code == 401

    def test_logout_without_cookie(self, client):
        response = client.post("/logout")

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing token"

    def test_logout_with_garbage_cookie(self, client):
        client.cookies.set("jwt", "garbage")

        response = client.post("/logout")

        assert response.status_code == 401

    def test_logout_twice_with_same_token(self, client, token):
        client.post("/logout")
        client.cookies.set("jwt", token)

        response = client.post("/logout")

        assert response.status_code == 401

    def test_verify_token_rejects_garbage(self, client):
        response = client.post("/verify-token", json={"token": "a.b.c"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    def test_verify_token_requires_body(self, client):
        assert client.post("/verify-token", json={}).status_code == 422


@pytest.mark.api
class TestSystem:
    """Test system endpoints and middleware."""

    def test_health(self, client, settings):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": settings.app_version,
        }

    def test_trace_id_header(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["X-Trace-Id"] == "trace-abc"

    def test_error_body_carries_trace_id(self, client):
        response = client.post("/logout", headers={"X-Trace-Id": "trace-abc"})

        assert response.json()["trace_id"] == "trace-abc"
