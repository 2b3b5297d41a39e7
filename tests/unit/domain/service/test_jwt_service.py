"""Unit tests for JWTService."""

from datetime import datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.util.jwt import JWTError

SECRET = "unit-test-secret-0123456789abcdef0123"


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret=SECRET))


def sign(payload: dict) -> str:
    """Sign an arbitrary payload with the service's secret."""
    return jwt.encode(
        {"exp": datetime.now() + timedelta(days=1), **payload},
        SECRET,
        algorithm="HS256",
    )


class TestJWTService:
    def test_token_round_trip_carries_identity(self, jwt_service):
        user_id = uuid4()

        token = jwt_service.create_token(
            str(user_id), name="Alice", avatar="http://a/1"
        )
        payload = jwt_service.verify_token(token)

        assert payload.user_id == user_id
        assert payload.name == "Alice"
        assert payload.avatar == "http://a/1"

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        other = JWTService(
            AuthSettings(jwt_secret="some-other-secret-0123456789abcdef0123")
        )
        token = other.create_token(str(uuid4()))

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    @pytest.mark.parametrize(
        "payload",
        [
            {"sub": "x"},
            {"user_id": "5c8a1d5b0190b214360dc031"},
        ],
    )
    def test_signed_token_without_uuid_user_id_is_rejected(
        self, jwt_service, payload
    ):
        with pytest.raises(JWTError):
            jwt_service.verify_token(sign(payload))

        assert jwt_service.get_user_id_from_token(sign(payload)) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_get_user_id_from_bad_token_is_none(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_get_user_id_from_valid_token(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id)

        assert jwt_service.get_user_id_from_token(token) == user_id
