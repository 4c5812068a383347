"""SQLAlchemy models for MovieBase tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from moviebase.infrastructure.persistence.models.movie import MovieModel
from moviebase.infrastructure.persistence.models.user import UserModel

__all__ = [
    "MovieModel",
    "UserModel",
]
