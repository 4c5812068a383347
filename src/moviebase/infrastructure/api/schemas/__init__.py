"""API schemas for request/response validation."""

from moviebase.infrastructure.api.schemas.movie_schemas import (
    DeleteMovieResponse,
    ErrorDetail,
    ErrorResponse,
    MovieRequest,
    MovieResponse,
    StandardResponse,
)

__all__ = [
    "DeleteMovieResponse",
    "ErrorDetail",
    "ErrorResponse",
    "MovieRequest",
    "MovieResponse",
    "StandardResponse",
]
