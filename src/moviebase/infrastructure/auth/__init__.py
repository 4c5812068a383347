"""Authentication infrastructure components.

This module provides the JWT token service, access token conversion and
authorization used by the movie API.
"""

from moviebase.infrastructure.auth.access_token_converter import (
    AccessTokenConverter,
    access_token_converter,
    parse_authorization_header,
)
from moviebase.infrastructure.auth.authorizer import Authorizer, authorizer
from moviebase.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
    jwt_service,
)

__all__ = [
    "AccessTokenConverter",
    "Authorizer",
    "InvalidTokenError",
    "JWTError",
    "JWTService",
    "TokenExpiredError",
    "access_token_converter",
    "authorizer",
    "jwt_service",
    "parse_authorization_header",
]
