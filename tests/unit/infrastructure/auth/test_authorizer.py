"""Unit tests for the domain-based Authorizer."""

from unittest.mock import patch

import pytest

from moviebase.core.config import Settings
from moviebase.domain.exceptions import DomainError, ErrorKind
from moviebase.infrastructure.auth.authorizer import Authorizer


def test_empty_domain_list_allows_everyone(valid_user):
    Authorizer([]).authorize(valid_user, "GET", "/api/v1/movies")


def test_email_domain_allowed(valid_user):
    Authorizer(["BAR.com"]).authorize(valid_user, "POST", "/api/v1/movies")


def test_hosted_domain_allowed(user_factory):
    user = user_factory(email="foo@gmail.com", hosted_domain="example.com")

    Authorizer(["example.com"]).authorize(user, "DELETE", "/api/v1/movies/x")


def test_other_domain_denied(user_factory):
    user = user_factory(email="foo@gmail.com", hosted_domain="")

    with pytest.raises(DomainError) as exc_info:
        Authorizer(["example.com"]).authorize(user, "PUT", "/api/v1/movies/x")

    assert exc_info.value.kind == ErrorKind.UNAUTHORIZED


def test_domains_default_to_settings(user_factory):
    user = user_factory(email="foo@gmail.com", hosted_domain="")
    settings = Settings(authorized_domains="example.com, example.org")

    with patch(
        "moviebase.infrastructure.auth.authorizer.get_settings",
        return_value=settings,
    ):
        authorizer = Authorizer()
        assert authorizer.authorized_domains == {"example.com", "example.org"}
        with pytest.raises(DomainError):
            authorizer.authorize(user, "GET", "/api/v1/movies")
