"""API Routes for MovieBase."""

from moviebase.infrastructure.api.routes.movies_router import router as movies_router

__all__ = [
    "movies_router",
]
