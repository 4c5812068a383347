"""Persistence contracts for movies.

``MovieTransactor`` covers writes and ``MovieSelector`` covers reads. Both
run inside a transaction owned by the caller: implementations never commit
or roll back, and the caller must roll back when any of these methods raise.

Implementations raise :class:`~moviebase.domain.exceptions.DomainError`
only, never raw driver errors.
"""

from abc import ABC, abstractmethod

from moviebase.domain.entities.movie import Movie


class MovieTransactor(ABC):
    """Write-side persistence for movies."""

    @abstractmethod
    async def create(self, movie: Movie) -> None:
        """Persist a new, already validated movie.

        Raises:
            DomainError: EXIST if the external ID is taken, DATABASE on
                store failure, CANCELLED if the call was cancelled.
        """
        ...

    @abstractmethod
    async def update(self, movie: Movie) -> None:
        """Persist the mutable fields of the movie with this external ID.

        Raises:
            DomainError: NOT_EXIST if no movie has the external ID.
        """
        ...

    @abstractmethod
    async def delete(self, movie: Movie) -> None:
        """Remove the movie with this external ID.

        Raises:
            DomainError: NOT_EXIST if no movie has the external ID.
        """
        ...


class MovieSelector(ABC):
    """Read-side persistence for movies."""

    @abstractmethod
    async def find_by_id(self, external_id: str) -> Movie:
        """Load one movie by external ID.

        Raises:
            DomainError: NOT_EXIST if no movie has the external ID.
        """
        ...

    @abstractmethod
    async def find_all(self) -> list[Movie]:
        """Load every movie, oldest first. Empty list when there are none."""
        ...
