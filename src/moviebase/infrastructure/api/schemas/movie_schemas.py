"""Pydantic schemas for movie operations."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from moviebase.domain.entities.movie import Movie, format_rfc3339

T = TypeVar("T")


class MovieRequest(BaseModel):
    """Request body for creating or updating a movie.

    Missing fields default to empty values so that domain validation
    reports them with the field name.
    """

    title: str = Field("", description="Movie title")
    rated: str = Field("", description="Rating, e.g. R")
    release_date: str = Field("", description="Release date-time in RFC 3339 format")
    run_time: int = Field(0, description="Run time in minutes")
    director: str = Field("", description="Director name")
    writer: str = Field("", description="Writer name")


class MovieResponse(BaseModel):
    """Movie as returned by the API."""

    external_id: str
    title: str
    rated: str
    release_date: str
    run_time: int
    director: str
    writer: str
    create_username: str
    create_timestamp: str
    update_username: str
    update_timestamp: str

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            external_id=movie.external_id,
            title=movie.title,
            rated=movie.rated,
            release_date=format_rfc3339(movie.released),
            run_time=movie.run_time,
            director=movie.director,
            writer=movie.writer,
            create_username=movie.create_user.email if movie.create_user else "",
            create_timestamp=format_rfc3339(movie.create_time),
            update_username=movie.update_user.email if movie.update_user else "",
            update_timestamp=format_rfc3339(movie.update_time),
        )


class DeleteMovieResponse(BaseModel):
    """Response data for a deleted movie."""

    extl_id: str
    deleted: bool = True


class StandardResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""

    path: str = Field(..., description="Request path")
    request_id: str = Field(..., description="Request ID, also sent as X-Request-ID")
    data: T


class ErrorDetail(BaseModel):
    """Error details."""

    kind: str
    code: str | None = None
    param: str | None = None
    message: str


class ErrorResponse(BaseModel):
    """Envelope wrapping every error response."""

    error: ErrorDetail
