"""Core MovieBase utilities."""

from moviebase.core.config import Settings, get_settings
from moviebase.core.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    new_request_id,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "bind_request_id",
    "clear_context",
    "new_request_id",
]
