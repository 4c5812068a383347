"""Persistence repositories for database operations."""

from moviebase.infrastructure.persistence.repositories.movie_repository import (
    SQLMovieSelector,
    SQLMovieTransactor,
)
from moviebase.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "SQLMovieSelector",
    "SQLMovieTransactor",
    "UserRepository",
]
