"""Tests for registration, login and the bearer-token dependency."""
from datetime import timedelta

from sqlalchemy.exc import OperationalError

from planner.auth import create_access_token
from planner.database import get_db
from planner.main import app
from planner.models.user import User
from tests.conftest import register_user


class TestRegistration:
    """POST /api/users."""

    def test_create_user(self, client):
        resp = client.post("/api/users/", json={
            "first_name": "Rachel",
            "last_name": "Green",
            "username": "rachel",
            "password": "pw",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["username"] == "rachel"
        assert data["first_name"] == "Rachel"
        assert data["default_timezone"] == "UTC"
        assert "user_id" in data
        assert "password" not in data
        assert "password_hash" not in data

    def test_missing_fields_rejected(self, client):
        resp = client.post("/api/users/", json={"username": "rachel"})
        assert resp.status_code == 422

    def test_duplicate_username_conflict(self, client):
        register_user(client, username="rachel")
        resp = client.post("/api/users/", json={
            "first_name": "Other",
            "last_name": "Person",
            "username": "rachel",
            "password": "pw",
        })
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Username already exists"

    def test_unknown_timezone_rejected(self, client):
        resp = client.post("/api/users/", json={
            "first_name": "Tz",
            "last_name": "Person",
            "username": "tz",
            "password": "pw",
            "default_timezone": "Mars/Olympus",
        })
        assert resp.status_code == 400


class TestLogin:
    """POST /api/login."""

    def test_login_returns_token(self, client):
        user = register_user(client, username="monica", password="clean")
        assert user["token"]
        resp = client.post("/api/login", json={"username": "monica", "password": "clean"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login successful"
        assert body["user"]["user_id"] == user["user_id"]

    def test_unknown_username(self, client):
        resp = client.post("/api/login", json={"username": "nobody", "password": "x"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Username not found"

    def test_wrong_password(self, client):
        register_user(client, username="joey", password="right")
        resp = client.post("/api/login", json={"username": "joey", "password": "wrong"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid password"


class TestAuthenticatedRoutes:
    """Bearer token handling."""

    def test_list_users_requires_token(self, client):
        resp = client.get("/api/users/")
        assert resp.status_code == 401
        assert resp.json()["detail"] == "No token provided"

    def test_invalid_token(self, client):
        resp = client.get("/api/users/", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid token"

    def test_expired_token(self, client, db):
        alice = register_user(client, username="alice")
        user = db.query(User).filter(User.user_id == alice["user_id"]).one()
        token = create_access_token(user, expires_delta=timedelta(seconds=-10))
        resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid token"

    def test_list_users(self, client):
        alice = register_user(client, username="alice")
        register_user(client, username="bob")
        resp = client.get("/api/users/", headers=alice["headers"])
        assert resp.status_code == 200
        names = [u["username"] for u in resp.json()]
        assert names == ["alice", "bob"]

    def test_me(self, client):
        alice = register_user(client, username="alice")
        resp = client.get("/api/users/me", headers=alice["headers"])
        assert resp.status_code == 200
        assert resp.json()["user_id"] == alice["user_id"]


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.json()["database"] == "connected"

    def test_health_database_down(self, client):
        class _BrokenSession:
            def execute(self, *args, **kwargs):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

            def close(self):
                pass

        def _broken_db():
            yield _BrokenSession()

        app.dependency_overrides[get_db] = _broken_db
        resp = client.get("/api/health")
        assert resp.status_code == 503
        assert resp.json()["status"] == "unhealthy"
        assert resp.json()["database"] == "error"
