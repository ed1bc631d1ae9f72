"""
Bloglist API - User Endpoint Tests
===================================

What:  GET/POST /api/users over HTTP, starting from two saved users.
"""

import pytest

pytestmark = pytest.mark.usefixtures("root_user", "other_user")


class TestListUsers:

    @pytest.mark.asyncio
    async def test_all_users_are_returned_as_json(self, test_client):
        response = await test_client.get("/api/users")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_users_have_id_and_no_password_hash(self, test_client):
        response = await test_client.get("/api/users")

        for user in response.json():
            assert "id" in user
            assert "password_hash" not in user
            assert "password" not in user

    @pytest.mark.asyncio
    async def test_specific_user_is_within_returned_users(self, test_client):
        response = await test_client.get("/api/users")

        assert "root" in [u["username"] for u in response.json()]


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_creation_succeeds_with_fresh_username(self, test_client, users_in_db):
        users_at_start = await users_in_db()
        new_user = {
            "username": "mluukkai",
            "name": "Matti Luukkainen",
            "password": "salainen",
        }

        response = await test_client.post("/api/users", json=new_user)

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["blogs"] == []
        users_at_end = await users_in_db()
        assert len(users_at_end) == len(users_at_start) + 1
        assert "mluukkai" in [u.username for u in users_at_end]

    @pytest.mark.asyncio
    async def test_fails_if_username_already_taken(self, test_client, users_in_db):
        users_at_start = await users_in_db()

        response = await test_client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )

        assert response.status_code == 400
        assert "expected `username` to be unique" in response.json()["message"]
        assert len(await users_in_db()) == len(users_at_start)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username",
        [
            "ab",            # shorter than 3 characters
            "invalid!name",  # "!" is not a letter, digit or underscore
        ],
    )
    async def test_fails_with_invalid_username(self, test_client, users_in_db, username):
        users_at_start = await users_in_db()

        response = await test_client.post(
            "/api/users",
            json={"username": username, "password": "ValidPass123"},
        )

        assert response.status_code == 400
        assert response.json()["details"]["errors"][0]["field"] == "username"
        assert len(await users_in_db()) == len(users_at_start)

    @pytest.mark.asyncio
    async def test_invalid_characters_get_readable_message(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"username": "invalid!name", "name": "InvalidCharUser", "password": "ValidPass123"},
        )

        assert response.status_code == 400
        assert "Only letters, numbers, and underscores are allowed" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_fails_if_username_missing(self, test_client, users_in_db):
        users_at_start = await users_in_db()

        response = await test_client.post(
            "/api/users",
            json={"name": "NoUsernameUser", "password": "ValidPass123"},
        )

        assert response.status_code == 400
        assert "username" in response.json()["message"]
        assert len(await users_in_db()) == len(users_at_start)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "validUser", "name": "ShortPasswordUser", "password": "Ab1"},
            {"username": "validUser5", "name": "NoPasswordUser"},
        ],
    )
    async def test_fails_with_short_or_missing_password(self, test_client, users_in_db, payload):
        users_at_start = await users_in_db()

        response = await test_client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert "Password must be at least 4 characters long" in response.json()["message"]
        assert len(await users_in_db()) == len(users_at_start)
