"""Domain entities for MovieBase.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from moviebase.domain.entities.movie import Movie, new_movie
from moviebase.domain.entities.user import User

__all__ = [
    "Movie",
    "User",
    "new_movie",
]
