"""Domain services for MovieBase.

Services contain business logic and contracts that don't belong to a single
entity. They have no dependencies on infrastructure or external frameworks.
"""

from moviebase.domain.services.movie_store import MovieSelector, MovieTransactor
from moviebase.domain.services.string_generator import (
    CryptoStringGenerator,
    StringGenerator,
    string_generator,
)

__all__ = [
    "CryptoStringGenerator",
    "MovieSelector",
    "MovieTransactor",
    "StringGenerator",
    "string_generator",
]
