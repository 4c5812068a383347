"""FastAPI dependencies for authentication, authorization and persistence.

Route handlers depend on the abstract ``MovieTransactor``, ``MovieSelector``
and ``StringGenerator`` contracts; the functions below provide the default
implementations and can be overridden through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from moviebase.core.logging import get_logger, new_request_id
from moviebase.domain.entities.user import User
from moviebase.domain.services import (
    MovieSelector,
    MovieTransactor,
    StringGenerator,
    string_generator,
)
from moviebase.infrastructure.auth import (
    AccessTokenConverter,
    Authorizer,
    access_token_converter,
    authorizer,
    parse_authorization_header,
)
from moviebase.infrastructure.persistence.database import get_db_session
from moviebase.infrastructure.persistence.repositories import (
    SQLMovieSelector,
    SQLMovieTransactor,
)

logger = get_logger(__name__)


def get_access_token_converter() -> AccessTokenConverter:
    """Get the access token converter."""
    return access_token_converter


def get_authorizer() -> Authorizer:
    """Get the authorizer."""
    return authorizer


def get_string_generator() -> StringGenerator:
    """Get the random string generator used for external IDs."""
    return string_generator


def get_request_id(request: Request) -> str:
    """Get the request ID assigned by the logging middleware."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id


async def get_current_user(
    request: Request,
    converter: Annotated[AccessTokenConverter, Depends(get_access_token_converter)],
    authz: Annotated[Authorizer, Depends(get_authorizer)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Authenticate and authorize the caller.

    Args:
        request: The incoming request, used for the authorization check.
        converter: Converts the bearer token into a user.
        authz: Decides whether the user may call the route.
        authorization: The Authorization header value (e.g., "Bearer <token>").

    Returns:
        User: The authenticated, authorized user.

    Raises:
        DomainError: UNAUTHENTICATED if the token is missing, invalid or
            expired; UNAUTHORIZED if the user may not call the route.
    """
    token = parse_authorization_header(authorization)
    user = converter.convert(token)
    authz.authorize(user, request.method, request.url.path)
    return user


def get_movie_transactor(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MovieTransactor:
    """Get the write-side movie store bound to the request session."""
    return SQLMovieTransactor(session)


def get_movie_selector(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MovieSelector:
    """Get the read-side movie store bound to the request session."""
    return SQLMovieSelector(session)


# Type aliases for dependency injection
AuthenticatedUser = Annotated[User, Depends(get_current_user)]
DBSession = Annotated[AsyncSession, Depends(get_db_session)]
Transactor = Annotated[MovieTransactor, Depends(get_movie_transactor)]
Selector = Annotated[MovieSelector, Depends(get_movie_selector)]
RandomStrings = Annotated[StringGenerator, Depends(get_string_generator)]
RequestID = Annotated[str, Depends(get_request_id)]
