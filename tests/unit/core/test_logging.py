"""Unit tests for structured logging helpers."""

import re

import pytest
import structlog

from moviebase.core.config import Settings
from moviebase.core.logging import (
    add_request_id,
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    new_request_id,
    rename_message_field,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


def test_new_request_id_format():
    request_id = new_request_id()

    assert re.fullmatch(r"req_[0-9a-f]{16}", request_id)
    assert new_request_id() != request_id


def test_add_request_id_defaults_to_dash():
    assert add_request_id(None, "info", {})["request_id"] == "-"
    assert add_request_id(None, "info", {"request_id": "abc"})["request_id"] == "abc"


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "hello"}) == {"message": "hello"}


def test_bound_request_id_is_merged_into_events():
    clear_context()
    bind_request_id("req_test")
    try:
        context = structlog.contextvars.get_contextvars()
        assert context["request_id"] == "req_test"
    finally:
        clear_context()

    assert structlog.contextvars.get_contextvars() == {}


def test_configure_logging_json(capsys):
    configure_logging(Settings(environment="production", log_format="json"))

    get_logger("moviebase.test").info("Movie created", extl_id="abc")

    out = capsys.readouterr().out
    assert '"message": "Movie created"' in out
    assert '"extl_id": "abc"' in out
    assert '"request_id": "-"' in out


def test_configure_logging_console():
    configure_logging(Settings(environment="development", log_format="console"))

    assert get_logger() is not None
