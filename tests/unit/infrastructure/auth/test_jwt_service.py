"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest

from moviebase.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
)

SECRET_KEY = "unit-test-secret"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET_KEY)


class TestJWTService:

    def test_create_access_token_carries_profile_claims(self, service, valid_user):
        """The user profile is embedded in the token claims."""
        token = service.create_access_token(valid_user)

        decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"], issuer="moviebase")

        assert decoded["sub"] == "foo@bar.com"
        assert decoded["email"] == "foo@bar.com"
        assert decoded["family_name"] == "Bar"
        assert decoded["given_name"] == "Foo"
        assert decoded["name"] == "Foo Bar"
        assert decoded["hd"] == "example.com"
        assert decoded["picture"] == "example.com/profile.png"
        assert decoded["profile"] == "example.com/FooBar"
        assert decoded["type"] == "access"
        assert "exp" in decoded
        assert "iat" in decoded

    def test_create_access_token_expiration(self, service, valid_user):
        expires_delta = timedelta(minutes=15)

        start_time = datetime.now(timezone.utc)
        token = service.create_access_token(valid_user, expires_delta=expires_delta)
        decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"], issuer="moviebase")

        exp_dt = datetime.fromtimestamp(decoded["exp"], tz=timezone.utc)
        # Allow small window for execution time
        assert (
            start_time + expires_delta - timedelta(seconds=2)
            <= exp_dt
            <= start_time + expires_delta + timedelta(seconds=2)
        )

    def test_validate_access_token(self, service, valid_user):
        token = service.create_access_token(valid_user)

        payload = service.validate_access_token(token)

        assert payload["email"] == valid_user.email

    def test_expired_token(self, service, valid_user):
        token = service.create_access_token(valid_user, expires_delta=timedelta(seconds=-1))

        with pytest.raises(TokenExpiredError):
            service.decode_token(token)

    def test_wrong_secret(self, service, valid_user):
        token = JWTService(secret_key="other-secret").create_access_token(valid_user)

        with pytest.raises(InvalidTokenError):
            service.decode_token(token)

    def test_garbage_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.decode_token("abc123def1")

    def test_wrong_issuer(self, service):
        token = jwt.encode(
            {"iss": "someone-else", "type": "access", "email": "foo@bar.com"},
            SECRET_KEY,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            service.decode_token(token)

    def test_not_an_access_token(self, service):
        token = jwt.encode(
            {"iss": "moviebase", "type": "refresh", "email": "foo@bar.com"},
            SECRET_KEY,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Not an access token"):
            service.validate_access_token(token)

    def test_error_hierarchy(self):
        assert issubclass(TokenExpiredError, JWTError)
        assert issubclass(InvalidTokenError, JWTError)
