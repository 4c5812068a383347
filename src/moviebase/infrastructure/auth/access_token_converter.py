"""Conversion of bearer access tokens into domain users."""

from moviebase.core.logging import get_logger
from moviebase.domain.entities.user import User
from moviebase.domain.exceptions import DomainError, ErrorKind
from moviebase.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
    jwt_service,
)

logger = get_logger(__name__)

BEARER_TOKEN_TYPE = "Bearer"


def parse_authorization_header(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        DomainError: UNAUTHENTICATED when the header is missing or malformed.
    """
    if not authorization:
        raise DomainError(
            ErrorKind.UNAUTHENTICATED,
            "Missing Authorization header",
            param="Authorization",
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_TOKEN_TYPE.lower():
        raise DomainError(
            ErrorKind.UNAUTHENTICATED,
            "Authorization header must be of the form 'Bearer <token>'",
            param="Authorization",
        )
    return parts[1]


class AccessTokenConverter:
    """Turns an access token into the user it was issued to."""

    def __init__(self, service: JWTService | None = None) -> None:
        self.service = service or jwt_service

    def convert(self, token: str) -> User:
        """Validate the token and build the user from its claims.

        Raises:
            DomainError: UNAUTHENTICATED for expired or invalid tokens, or
                when the claims do not describe a valid user.
        """
        try:
            claims = self.service.validate_access_token(token)
        except TokenExpiredError as e:
            logger.info("Authentication failed: token expired")
            raise DomainError(ErrorKind.UNAUTHENTICATED, "Token has expired") from e
        except InvalidTokenError as e:
            logger.info("Authentication failed: invalid token", error=str(e))
            raise DomainError(ErrorKind.UNAUTHENTICATED, f"Invalid token: {e}") from e

        user = User(
            email=claims.get("email", ""),
            last_name=claims.get("family_name", ""),
            first_name=claims.get("given_name", ""),
            full_name=claims.get("name", ""),
            hosted_domain=claims.get("hd", ""),
            picture_url=claims.get("picture", ""),
            profile_link=claims.get("profile", ""),
        )
        if not user.is_valid():
            logger.info("Authentication failed: incomplete user profile", email=user.email)
            raise DomainError(
                ErrorKind.UNAUTHENTICATED,
                "Token does not describe a valid user",
            )
        return user


# Default converter instance
access_token_converter = AccessTokenConverter()
