"""
Tests for Authentication Endpoints

Tests cover:
- POST /auth/register
- POST /auth/login
- GET /auth/me
- The full register → login → review flow
"""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from review_api.models import User
from review_api.services.items import create_item
from review_api.services.security import TokenService


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestRegister:
    def test_register_returns_token(
        self, client: TestClient, db_session: Session, token_service: TokenService
    ):
        response = client.post("/api/auth/register", json={"username": "moe", "password": "m_pw"})

        assert response.status_code == status.HTTP_200_OK
        token = response.json()["token"]

        user = db_session.execute(select(User).where(User.username == "moe")).scalar_one()
        assert token_service.verify(token) == user.id

    def test_register_duplicate(self, client: TestClient, db_session: Session, moe: User):
        response = client.post("/api/auth/register", json={"username": "moe", "password": "x"})

        assert response.status_code == status.HTTP_409_CONFLICT
        count = db_session.execute(
            select(func.count()).select_from(User).where(User.username == "moe")
        ).scalar()
        assert count == 1

    def test_register_username_too_long(self, client: TestClient):
        response = client.post(
            "/api/auth/register",
            json={"username": "x" * 21, "password": "pw"},
        )

        assert response.status_code == 422

    def test_register_missing_password(self, client: TestClient):
        response = client.post("/api/auth/register", json={"username": "moe"})

        assert response.status_code == 422


class TestLogin:
    def test_login_success(self, client: TestClient, token_service: TokenService, moe: User):
        response = client.post("/api/auth/login", json={"username": "moe", "password": "m_pw"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["token_type"] == "bearer"
        assert token_service.verify(response.json()["token"]) == moe.id

    def test_wrong_password_and_unknown_user_look_the_same(self, client: TestClient, moe: User):
        wrong = client.post("/api/auth/login", json={"username": "moe", "password": "nope"})
        unknown = client.post("/api/auth/login", json={"username": "nobody", "password": "m_pw"})

        assert wrong.status_code == status.HTTP_401_UNAUTHORIZED
        assert unknown.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong.json() == unknown.json()

    def test_username_longer_than_any_account(self, client: TestClient, moe: User):
        """A username registration would refuse can only fail as bad credentials."""
        response = client.post("/api/auth/login", json={"username": "x" * 21, "password": "pw"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "not authorized"}

    def test_empty_username_is_invalid(self, client: TestClient):
        response = client.post("/api/auth/login", json={"username": "", "password": "pw"})

        assert response.status_code == 422


class TestMe:
    def test_me(self, client: TestClient, auth_header, moe: User):
        response = client.get("/api/auth/me", headers=auth_header(moe))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": str(moe.id), "username": "moe"}

    def test_me_without_token(self, client: TestClient):
        response = client.get("/api/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client: TestClient):
        response = client.get("/api/auth/me", headers=bearer("garbage"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_after_user_deleted(
        self, client: TestClient, db_session: Session, auth_header, moe: User
    ):
        headers = auth_header(moe)
        db_session.delete(moe)
        db_session.commit()

        response = client.get("/api/auth/me", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestEndToEnd:
    def test_register_login_review_flow(self, client: TestClient, db_session: Session):
        response = client.post("/api/auth/register", json={"username": "moe", "password": "m_pw"})
        assert response.status_code == status.HTTP_200_OK

        response = client.post("/api/auth/login", json={"username": "moe", "password": "m_pw"})
        assert response.status_code == status.HTTP_200_OK
        headers = bearer(response.json()["token"])

        me = client.get("/api/auth/me", headers=headers).json()
        assert me["username"] == "moe"

        foo = create_item(db_session, "foo", "foo description")

        response = client.post(
            f"/api/items/{foo.id}/reviews",
            json={"text": "ok", "rating": 4},
            headers=headers,
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["user_id"] == me["id"]

        response = client.post(
            f"/api/items/{foo.id}/reviews",
            json={"text": "again", "rating": 2},
            headers=headers,
        )
        assert response.status_code == status.HTTP_409_CONFLICT

        reviews = client.get(f"/api/items/{foo.id}/reviews").json()
        assert [r["text"] for r in reviews] == ["ok"]
        assert client.get(f"/api/items/{foo.id}").json()["average_rating"] == 4
