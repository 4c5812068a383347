"""JSON content-type middleware for MovieBase.

Requests that carry a body on API routes must be sent as JSON. Anything
else is rejected with 415 before it reaches a handler.
"""

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from moviebase.core.config import get_settings
from moviebase.core.logging import get_logger
from moviebase.domain.exceptions import validation_error

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """Middleware rejecting non-JSON request bodies on API routes."""

    def __init__(self, app: ASGIApp, path_prefix: str | None = None) -> None:
        super().__init__(app)
        self.path_prefix = path_prefix if path_prefix is not None else get_settings().api_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Check the request Content-Type before calling the handler.

        Args:
            request: The incoming request.
            call_next: The next middleware/endpoint to call.

        Returns:
            The handler's response, or a 415 error envelope.
        """
        if request.method in BODY_METHODS and request.url.path.startswith(self.path_prefix):
            content_type = request.headers.get("content-type", "")
            media_type = content_type.split(";")[0].strip().lower()
            if media_type != JSON_MEDIA_TYPE:
                logger.info(
                    "Rejected request with unsupported content type",
                    method=request.method,
                    path=request.url.path,
                    content_type=content_type,
                )
                error = validation_error(
                    "Content-Type",
                    f"Content-Type must be {JSON_MEDIA_TYPE}",
                    code="unsupported_media_type",
                )
                return JSONResponse(
                    status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                    content={"error": error.to_dict()},
                )

        return await call_next(request)
