"""Unit tests for domain errors."""

from moviebase.domain.exceptions import (
    DomainError,
    ErrorKind,
    missing_field,
    validation_error,
)


def test_domain_error_str_is_message():
    err = DomainError(ErrorKind.NOT_EXIST, "No movie", param="extlID")

    assert str(err) == "No movie"
    assert err.kind == ErrorKind.NOT_EXIST
    assert err.param == "extlID"
    assert err.code is None


def test_matches_compares_all_parts():
    err = validation_error("title", missing_field("title"))

    assert err.matches(validation_error("title", "title is required"))
    assert not err.matches(validation_error("rated", "title is required"))
    assert not err.matches(validation_error("title", "title is required", code="x"))
    assert not err.matches(DomainError(ErrorKind.EXIST, "title is required", param="title"))


def test_to_dict():
    err = validation_error("release_date", "bad date", code="invalid_date_format")

    assert err.to_dict() == {
        "kind": "validation",
        "code": "invalid_date_format",
        "param": "release_date",
        "message": "bad date",
    }


def test_error_kind_values():
    assert {kind.value for kind in ErrorKind} == {
        "validation",
        "unauthenticated",
        "unauthorized",
        "exist",
        "not_exist",
        "database",
        "internal",
        "cancelled",
    }
