"""SQL implementations of the movie persistence contracts.

Both classes work on a session whose transaction belongs to the caller:
they flush but never commit or roll back. SQLAlchemy and driver errors are
translated into ``DomainError`` before leaving this module.
"""

import asyncio
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from moviebase.core.logging import get_logger
from moviebase.domain.entities.movie import Movie
from moviebase.domain.exceptions import DomainError, ErrorKind
from moviebase.domain.services.movie_store import MovieSelector, MovieTransactor
from moviebase.infrastructure.persistence.models import MovieModel
from moviebase.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
    to_domain_user,
)

logger = get_logger(__name__)


@contextmanager
def translate_store_errors(operation: str, external_id: str | None = None) -> Iterator[None]:
    """Wrap store failures and cancellation into domain errors.

    Args:
        operation: Name of the persistence operation, for logging.
        external_id: External ID involved, for logging.
    """
    try:
        yield
    except asyncio.CancelledError as e:
        # The cancellation is consumed here. The task still counts as cancelling
        # and asyncio.timeout() callers get DomainError rather than TimeoutError.
        logger.info("Movie store call cancelled", operation=operation, extl_id=external_id)
        raise DomainError(
            ErrorKind.CANCELLED,
            f"{operation} was cancelled",
        ) from e
    except SQLAlchemyError as e:
        logger.error(
            "Movie store call failed",
            operation=operation,
            extl_id=external_id,
            error=str(e),
            exc_type=type(e).__name__,
        )
        raise DomainError(
            ErrorKind.DATABASE,
            f"{operation} failed",
        ) from e
    except (OverflowError, ValueError) as e:
        # Values the driver cannot represent, e.g. out-of-range integers or dates
        logger.error(
            "Movie store call rejected a value",
            operation=operation,
            extl_id=external_id,
            error=str(e),
            exc_type=type(e).__name__,
        )
        raise DomainError(
            ErrorKind.DATABASE,
            f"{operation} failed: value out of range",
        ) from e


def not_found(external_id: str) -> DomainError:
    """Error raised when no movie has the external ID."""
    return DomainError(
        ErrorKind.NOT_EXIST,
        f"No movie exists for external ID {external_id}",
        param="extlID",
    )


def already_exists(external_id: str) -> DomainError:
    """Error raised when the external ID is already taken."""
    return DomainError(
        ErrorKind.EXIST,
        f"A movie already exists for external ID {external_id}",
        param="extlID",
    )


def _as_utc(value: datetime) -> datetime:
    """Normalize a timestamp to aware UTC (SQLite returns naive values)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_domain_movie(model: MovieModel) -> Movie:
    """Rebuild a domain movie from a row and its joined users."""
    return Movie(
        id=uuid.UUID(model.movie_id),
        external_id=model.extl_id,
        title=model.title,
        rated=model.rated,
        released=_as_utc(model.released),
        run_time=model.run_time,
        director=model.director,
        writer=model.writer,
        create_user=to_domain_user(model.create_user),
        create_time=_as_utc(model.create_timestamp),
        update_user=to_domain_user(model.update_user),
        update_time=_as_utc(model.update_timestamp),
    )


async def _get_model(session: AsyncSession, external_id: str) -> MovieModel | None:
    result = await session.execute(
        select(MovieModel).where(MovieModel.extl_id == external_id)
    )
    return result.scalar_one_or_none()


class SQLMovieTransactor(MovieTransactor):
    """Write-side movie persistence on a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the transactor.

        Args:
            session: SQLAlchemy async session with the caller's transaction.
        """
        self.session = session
        self.users = UserRepository(session)

    async def create(self, movie: Movie) -> None:
        with translate_store_errors("create movie", movie.external_id):
            if await _get_model(self.session, movie.external_id) is not None:
                raise already_exists(movie.external_id)

            create_user = await self.users.get_or_create_profile(movie.create_user)
            update_user = await self.users.get_or_create_profile(movie.update_user)

            self.session.add(
                MovieModel(
                    movie_id=str(movie.id),
                    extl_id=movie.external_id,
                    title=movie.title,
                    rated=movie.rated,
                    released=_as_utc(movie.released),
                    run_time=movie.run_time,
                    director=movie.director,
                    writer=movie.writer,
                    create_user=create_user,
                    create_timestamp=_as_utc(movie.create_time),
                    update_user=update_user,
                    update_timestamp=_as_utc(movie.update_time),
                )
            )
            try:
                await self.session.flush()
            except IntegrityError as e:
                # Unique index on extl_id, hit by a concurrent insert
                logger.info("Movie external ID already exists", extl_id=movie.external_id)
                raise already_exists(movie.external_id) from e

        logger.debug("Movie created", extl_id=movie.external_id)

    async def update(self, movie: Movie) -> None:
        with translate_store_errors("update movie", movie.external_id):
            model = await _get_model(self.session, movie.external_id)
            if model is None:
                raise not_found(movie.external_id)

            update_user = await self.users.get_or_create_profile(movie.update_user)

            # id, extl_id, create user and create time never change
            model.title = movie.title
            model.rated = movie.rated
            model.released = _as_utc(movie.released)
            model.run_time = movie.run_time
            model.director = movie.director
            model.writer = movie.writer
            model.update_user = update_user
            model.update_timestamp = _as_utc(movie.update_time)

            await self.session.flush()

        logger.debug("Movie updated", extl_id=movie.external_id)

    async def delete(self, movie: Movie) -> None:
        with translate_store_errors("delete movie", movie.external_id):
            model = await _get_model(self.session, movie.external_id)
            if model is None:
                raise not_found(movie.external_id)

            await self.session.delete(model)
            await self.session.flush()

        logger.debug("Movie deleted", extl_id=movie.external_id)


class SQLMovieSelector(MovieSelector):
    """Read-side movie persistence on a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, external_id: str) -> Movie:
        with translate_store_errors("find movie", external_id):
            model = await _get_model(self.session, external_id)
            if model is None:
                raise not_found(external_id)
            return to_domain_movie(model)

    async def find_all(self) -> list[Movie]:
        with translate_store_errors("find all movies"):
            result = await self.session.execute(
                select(MovieModel).order_by(
                    MovieModel.create_timestamp.asc(),
                    MovieModel.extl_id.asc(),
                )
            )
            return [to_domain_movie(model) for model in result.scalars().all()]
