"""Movie entity with its mutation and validation rules.

A movie is created with ``new_movie`` and then filled in with chainable
setters. Setters do not validate; ``Movie.is_valid`` must be called before
the movie is handed to a transactor.
"""

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from moviebase.domain.entities.user import User
from moviebase.domain.exceptions import DomainError, ErrorKind, missing_field, validation_error

NIL_UUID = uuid.UUID(int=0)

# Zero instant, treated the same as an unset release date
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# Largest run time the movies.run_time INTEGER column holds
MAX_RUN_TIME = 2**31 - 1

# RFC 3339 date-time: offset is mandatory, "T" separator only
RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 date-time string into an aware datetime.

    Raises:
        ValueError: If the value is not a valid RFC 3339 date-time.
    """
    if not RFC3339_PATTERN.match(value):
        raise ValueError(f'parsing time "{value}" as RFC 3339: invalid format')
    parsed = datetime.fromisoformat(value)
    try:
        parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f'parsing time "{value}" as RFC 3339: out of range') from e
    return parsed


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(timezone.utc)


def format_rfc3339(value: datetime | None) -> str:
    """Render an aware datetime as RFC 3339 with second precision.

    UTC is written with a "Z" suffix. None renders as an empty string.
    """
    if value is None:
        return ""
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass
class Movie:
    """A movie and its audit metadata.

    Attributes:
        id: Internal identifier, assigned once at creation.
        external_id: Externally visible identifier, assigned once at creation.
        title: Movie title.
        rated: Rating (e.g. "R").
        released: Release date-time, None when unset.
        run_time: Run time in minutes.
        director: Director name.
        writer: Writer name.
        create_user: User who created the movie.
        create_time: Creation timestamp (UTC).
        update_user: User who last updated the movie.
        update_time: Last update timestamp (UTC).
    """

    id: uuid.UUID = NIL_UUID
    external_id: str = ""
    title: str = ""
    rated: str = ""
    released: datetime | None = None
    run_time: int = 0
    director: str = ""
    writer: str = ""
    create_user: User | None = None
    create_time: datetime | None = None
    update_user: User | None = None
    update_time: datetime | None = None

    def set_external_id(self, external_id: str) -> "Movie":
        self.external_id = external_id
        return self

    def set_title(self, title: str) -> "Movie":
        self.title = title
        return self

    def set_rated(self, rated: str) -> "Movie":
        self.rated = rated
        return self

    def set_released(self, released: str) -> "Movie":
        """Parse and set the release date from an RFC 3339 string.

        Raises:
            DomainError: Validation error with code "invalid_date_format"
                when the string cannot be parsed.
        """
        try:
            self.released = parse_rfc3339(released)
        except ValueError as e:
            raise validation_error(
                "release_date", str(e), code="invalid_date_format"
            ) from e
        return self

    def set_run_time(self, run_time: int) -> "Movie":
        self.run_time = run_time
        return self

    def set_director(self, director: str) -> "Movie":
        self.director = director
        return self

    def set_writer(self, writer: str) -> "Movie":
        self.writer = writer
        return self

    def set_update_user(self, user: User) -> "Movie":
        self.update_user = user
        return self

    def set_update_time(self) -> "Movie":
        """Set the update time to now (UTC)."""
        self.update_time = utc_now()
        return self

    def is_valid(self) -> None:
        """Check that the movie is ready to be persisted.

        Raises:
            DomainError: Validation error naming the first missing or
                invalid field.
        """
        if not self.title:
            raise validation_error("title", missing_field("title"))
        if not self.rated:
            raise validation_error("rated", missing_field("Rated"))
        if self.released is None or self.released == ZERO_TIME:
            raise validation_error("release_date", "Released must have a value")
        if self.run_time <= 0:
            raise validation_error("run_time", "Run time must be greater than zero")
        if self.run_time > MAX_RUN_TIME:
            raise validation_error(
                "run_time", f"Run time must be at most {MAX_RUN_TIME}"
            )
        if not self.director:
            raise validation_error("director", missing_field("Director"))
        if not self.writer:
            raise validation_error("writer", missing_field("Writer"))
        if not self.external_id:
            raise validation_error("extlID", missing_field("extlID"))


def new_movie(movie_id: uuid.UUID | None, external_id: str, create_user: User) -> Movie:
    """Create a movie with its identity and audit fields populated.

    Args:
        movie_id: Internal identifier, must not be nil.
        external_id: External identifier, must not be empty.
        create_user: Creating user, must be valid.

    Returns:
        Movie with create/update user and create/update time set.

    Raises:
        DomainError: Validation error for a nil ID, an empty external ID
            (both reported on parameter "ID") or an invalid user.
    """
    if movie_id is None or movie_id == NIL_UUID:
        raise validation_error("ID", missing_field("ID"))
    # An empty external ID is reported on "ID" as well
    if not external_id:
        raise validation_error("ID", missing_field("ID"))
    if create_user is None or not create_user.is_valid():
        raise DomainError(ErrorKind.VALIDATION, "User is invalid", param="User")

    now = utc_now()
    return Movie(
        id=movie_id,
        external_id=external_id,
        create_user=create_user,
        create_time=now,
        update_user=create_user,
        update_time=now,
    )
