"""HTTP middleware package."""

from moviebase.infrastructure.api.middleware.content_type_middleware import (
    JSONContentTypeMiddleware,
)

__all__ = [
    "JSONContentTypeMiddleware",
]
