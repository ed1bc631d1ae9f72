"""
Bloglist API - Password and Token Tests
========================================

What:  bcrypt hashing, token issue/verification, and the current-user
       dependency's failure modes.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import jwt
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from bloglist.config import settings
from bloglist.exceptions import AuthenticationError
from bloglist.security import (
    create_access_token,
    decode_access_token,
    get_current_user,
    hash_password,
    verify_password,
)


class TestPasswords:

    def test_hash_is_salted(self):
        assert hash_password("sekret") != hash_password("sekret")

    def test_verify_accepts_correct_password(self):
        assert verify_password("sekret", hash_password("sekret")) is True

    def test_verify_rejects_wrong_password(self):
        assert verify_password("wrong", hash_password("sekret")) is False

    def test_verify_rejects_malformed_hash(self):
        assert verify_password("sekret", "not-a-bcrypt-hash") is False


class TestTokens:

    def test_token_carries_username_and_id(self):
        user_id = uuid4()
        token = create_access_token(username="root", user_id=user_id)

        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])

        assert payload["username"] == "root"
        assert payload["id"] == str(user_id)
        assert payload["exp"] - payload["iat"] == settings.access_token_expire_seconds

    def test_decode_round_trip(self):
        user_id = uuid4()
        payload = decode_access_token(create_access_token("root", user_id))
        assert payload["id"] == str(user_id)

    def test_expired_token(self):
        token = create_access_token("root", uuid4(), expires_in=-10)
        with pytest.raises(AuthenticationError, match="token expired"):
            decode_access_token(token)

    def test_token_signed_with_other_key(self):
        token = jwt.encode(
            {"username": "root", "id": str(uuid4()), "exp": 4102444800},
            "some-other-secret",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError, match="token invalid"):
            decode_access_token(token)

    def test_token_without_expiry_is_rejected(self):
        token = jwt.encode(
            {"username": "root", "id": str(uuid4())},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(AuthenticationError, match="token invalid"):
            decode_access_token(token)

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError, match="token invalid"):
            decode_access_token("not.a.token")


class TestCurrentUser:

    @pytest.mark.asyncio
    async def test_missing_credentials(self, mock_db_session):
        with pytest.raises(AuthenticationError, match="token missing"):
            await get_current_user(credentials=None, db=mock_db_session)

    @pytest.mark.asyncio
    async def test_resolves_user(self, mock_db_session):
        user = MagicMock()
        user.id = uuid4()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = user
        mock_db_session.execute.return_value = mock_result

        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=create_access_token("root", user.id)
        )
        assert await get_current_user(credentials=credentials, db=mock_db_session) is user

    @pytest.mark.asyncio
    async def test_deleted_user(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=create_access_token("ghost", uuid4())
        )
        with pytest.raises(AuthenticationError, match="token invalid"):
            await get_current_user(credentials=credentials, db=mock_db_session)
