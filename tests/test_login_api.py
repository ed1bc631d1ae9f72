"""
Bloglist API - Login Endpoint Tests
====================================

What:  POST /api/login with one saved user ("root" / "sekret").
"""

import jwt
import pytest

from bloglist.config import settings

pytestmark = pytest.mark.usefixtures("root_user")


class TestLogin:

    @pytest.mark.asyncio
    async def test_fails_with_invalid_password(self, test_client):
        response = await test_client.post(
            "/api/login", json={"username": "root", "password": "wrongpassword"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "invalid username or password"

    @pytest.mark.asyncio
    async def test_fails_with_non_existing_user(self, test_client):
        response = await test_client.post(
            "/api/login", json={"username": "unknownuser", "password": "whatever"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "invalid username or password"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"password": "sekret"}, {"username": "root"}],
    )
    async def test_fails_with_400_if_field_missing(self, test_client, payload):
        response = await test_client.post("/api/login", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "username and password are required"

    @pytest.mark.asyncio
    async def test_succeeds_with_valid_credentials(self, test_client):
        response = await test_client.post(
            "/api/login", json={"username": "root", "password": "sekret"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["username"] == "root"
        assert body["name"] == "Superuser"

    @pytest.mark.asyncio
    async def test_returns_valid_token(self, test_client, root_user):
        response = await test_client.post(
            "/api/login", json={"username": "root", "password": "sekret"}
        )

        decoded = jwt.decode(
            response.json()["token"], settings.secret_key, algorithms=[settings.jwt_algorithm]
        )
        assert decoded["username"] == "root"
        assert decoded["id"] == str(root_user.id)

    @pytest.mark.asyncio
    async def test_token_authorizes_blog_creation(self, test_client):
        login = await test_client.post(
            "/api/login", json={"username": "root", "password": "sekret"}
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        response = await test_client.post(
            "/api/blogs",
            json={"title": "Logged in", "url": "https://example.com/in"},
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()["user"]["username"] == "root"
