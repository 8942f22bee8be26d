"""
Tests for User Authentication

Tests the auth service and the /api/v1/auth endpoints:
- Registration (username/password)
- Login (JWT token)
- Bearer token protection of the books endpoints

Coverage includes:
- Successful flows
- Duplicate usernames (application check and unique index)
- Login failures that must look identical to the caller
"""

from datetime import timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from jose import JWTError
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from library_api import stores
from library_api.exceptions import (
    DuplicateUsernameError,
    InternalError,
    InvalidCredentialsError,
    ValidationError,
)
from library_api.models import User
from library_api.services import auth as auth_service
from library_api.services.security import (
    create_access_token,
    decode_access_token,
    verify_password,
)
from tests.conftest import SAMPLE_PASSWORD


def count_users(db: Session, username: str) -> int:
    return db.execute(select(func.count(User.id)).where(User.username == username)).scalar()


class TestRegisterService:
    """Tests for auth_service.register()."""

    def test_register_persists_hashed_password(self, db_session: Session):
        user = auth_service.register(db_session, "newuser", "SecurePass123")

        assert user.id is not None
        assert user.username == "newuser"
        assert user.hashed_password != "SecurePass123"
        assert verify_password("SecurePass123", user.hashed_password)

    def test_register_strips_username(self, db_session: Session):
        user = auth_service.register(db_session, "  spaced  ", "SecurePass123")
        assert user.username == "spaced"

    def test_register_duplicate_username(self, db_session: Session):
        auth_service.register(db_session, "twice", "SecurePass123")

        with pytest.raises(DuplicateUsernameError):
            auth_service.register(db_session, "twice", "OtherPass456")

        assert count_users(db_session, "twice") == 1

    @pytest.mark.parametrize(
        "username,password",
        [("", "SecurePass123"), ("   ", "x"), ("name", ""), ("reader", "   ")],
    )
    def test_register_requires_username_and_password(self, db_session: Session, username, password):
        with pytest.raises(ValidationError, match="Username and password are required."):
            auth_service.register(db_session, username, password)

    def test_register_race_caught_by_unique_index(self, isolated_session: Session, monkeypatch):
        """If the application check misses a concurrent insert, the index still wins."""
        auth_service.register(isolated_session, "racer", "SecurePass123")
        monkeypatch.setattr(stores, "username_exists", lambda db, username: False)

        with pytest.raises(DuplicateUsernameError):
            auth_service.register(isolated_session, "racer", "SecurePass123")

        assert count_users(isolated_session, "racer") == 1


class TestLoginService:
    """Tests for auth_service.login()."""

    def test_login_returns_token_for_user(self, db_session: Session, sample_user: User):
        token = auth_service.login(db_session, "reader", SAMPLE_PASSWORD)
        payload = decode_access_token(token)

        assert payload["sub"] == "reader"
        assert payload["id"] == str(sample_user.id)

    def test_wrong_password_and_unknown_user_are_indistinguishable(
        self, db_session: Session, sample_user: User
    ):
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            auth_service.login(db_session, "reader", "WrongPassword1")

        with pytest.raises(InvalidCredentialsError) as unknown_user:
            auth_service.login(db_session, "nobody", SAMPLE_PASSWORD)

        assert wrong_password.value.message == unknown_user.value.message
        assert wrong_password.value.status_code == unknown_user.value.status_code == 401

    @pytest.mark.parametrize("username,password", [("", "x"), ("reader", ""), ("  ", "  ")])
    def test_login_empty_credentials(self, db_session: Session, username, password):
        with pytest.raises(InvalidCredentialsError):
            auth_service.login(db_session, username, password)

    def test_token_signing_failure_is_internal_error(
        self, db_session: Session, sample_user: User, monkeypatch
    ):
        def fail_to_sign(*args, **kwargs):
            raise JWTError("signing key unavailable")

        monkeypatch.setattr(auth_service, "create_access_token", fail_to_sign)

        with pytest.raises(InternalError, match="An error occurred while logging in"):
            auth_service.login(db_session, "reader", SAMPLE_PASSWORD)


class TestRegisterEndpoint:
    """Tests for POST /api/v1/auth/register"""

    def test_register_success(self, client: TestClient):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "newuser", "password": "SecurePass123"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["username"] == "newuser"
        assert isinstance(data["id"], int)
        # Password should NEVER be in response
        assert "password" not in data
        assert "hashed_password" not in data

    def test_register_duplicate_username(self, client: TestClient, db_session: Session):
        body = {"username": "takenuser", "password": "SecurePass123"}
        client.post("/api/v1/auth/register", json=body)

        response = client.post("/api/v1/auth/register", json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "User with the specified username already exists."}
        assert count_users(db_session, "takenuser") == 1

    def test_register_missing_password(self, client: TestClient):
        response = client.post("/api/v1/auth/register", json={"username": "nopass"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "required" in response.json()["message"]

    def test_register_overlong_username(self, client: TestClient):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "x" * 51, "password": "SecurePass123"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestLoginEndpoint:
    """Tests for POST /api/v1/auth/login"""

    def test_login_success(self, client: TestClient, sample_user: User):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "reader", "password": SAMPLE_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["tokenType"] == "bearer"
        assert data["expiresIn"] > 0
        assert decode_access_token(data["token"])["sub"] == "reader"

    def test_login_wrong_password(self, client: TestClient, sample_user: User):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "reader", "password": "WrongPassword1"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {
            "message": "Authentication failed. Invalid username or password."
        }
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_login_unknown_user_same_response(self, client: TestClient, sample_user: User):
        wrong_password = client.post(
            "/api/v1/auth/login",
            json={"username": "reader", "password": "WrongPassword1"},
        )
        unknown_user = client.post(
            "/api/v1/auth/login",
            json={"username": "ghost", "password": "WrongPassword1"},
        )

        assert unknown_user.status_code == wrong_password.status_code
        assert unknown_user.json() == wrong_password.json()

    def test_login_overlong_username_same_as_bad_login(self, client: TestClient):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "x" * 51, "password": "WrongPassword1"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {
            "message": "Authentication failed. Invalid username or password."
        }

    def test_login_empty_body(self, client: TestClient):
        response = client.post("/api/v1/auth/login", json={})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_register_then_login(self, client: TestClient):
        body = {"username": "roundtrip", "password": "SecurePass123"}
        client.post("/api/v1/auth/register", json=body)

        response = client.post("/api/v1/auth/login", json=body)

        assert response.status_code == status.HTTP_200_OK
        assert "token" in response.json()


class TestProtectedEndpoints:
    """Bearer token handling on /api/v1/books"""

    def test_missing_token(self, client: TestClient):
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"message": "Not authenticated"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client: TestClient):
        response = client.get(
            "/api/v1/books/",
            headers={"Authorization": "Bearer not-a-real-token"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"message": "Could not validate credentials"}

    def test_expired_token(self, client: TestClient, sample_user: User):
        token = create_access_token(
            sample_user.username, sample_user.id, expires_delta=timedelta(seconds=-1)
        )
        response = client.get("/api/v1/books/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_user(self, client: TestClient):
        token = create_access_token("ghost", 987654)
        response = client.get("/api/v1/books/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_valid_token(self, client: TestClient, auth_headers):
        response = client.get("/api/v1/books/", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
