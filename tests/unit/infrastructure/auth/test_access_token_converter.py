"""Unit tests for AccessTokenConverter and Authorization header parsing."""

from datetime import timedelta

import pytest

from moviebase.domain.entities.user import User
from moviebase.domain.exceptions import DomainError, ErrorKind
from moviebase.infrastructure.auth.access_token_converter import (
    AccessTokenConverter,
    parse_authorization_header,
)
from moviebase.infrastructure.auth.jwt_service import JWTService


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key="converter-secret")


@pytest.fixture
def converter(service) -> AccessTokenConverter:
    return AccessTokenConverter(service)


def test_convert_returns_user_from_claims(converter, service, valid_user):
    token = service.create_access_token(valid_user)

    assert converter.convert(token) == valid_user


def test_convert_expired_token(converter, service, valid_user):
    token = service.create_access_token(valid_user, expires_delta=timedelta(seconds=-1))

    with pytest.raises(DomainError) as exc_info:
        converter.convert(token)

    assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
    assert exc_info.value.message == "Token has expired"


def test_convert_invalid_token(converter):
    with pytest.raises(DomainError) as exc_info:
        converter.convert("abc123def1")

    assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED


def test_convert_incomplete_profile(converter, service):
    token = service.create_access_token(User(email="foo@bar.com"))

    with pytest.raises(DomainError) as exc_info:
        converter.convert(token)

    assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED


@pytest.mark.parametrize("header", ["Bearer abc", "bearer abc", "BEARER abc"])
def test_parse_authorization_header(header):
    assert parse_authorization_header(header) == "abc"


@pytest.mark.parametrize("header", [None, "", "abc", "Basic abc", "Bearer", "Bearer a b"])
def test_parse_authorization_header_rejects(header):
    with pytest.raises(DomainError) as exc_info:
        parse_authorization_header(header)

    assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
    assert exc_info.value.param == "Authorization"
