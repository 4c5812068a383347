"""Domain-based authorization for the movie API."""

from moviebase.core.config import get_settings
from moviebase.core.logging import get_logger
from moviebase.domain.entities.user import User
from moviebase.domain.exceptions import DomainError, ErrorKind

logger = get_logger(__name__)


class Authorizer:
    """Allows a user when their email or hosted domain is authorized.

    An empty list of authorized domains allows every authenticated user.
    """

    def __init__(self, authorized_domains: list[str] | None = None) -> None:
        self._authorized_domains = authorized_domains

    @property
    def authorized_domains(self) -> set[str]:
        domains = self._authorized_domains
        if domains is None:
            domains = get_settings().authorized_domains
        return {d.lower() for d in domains}

    def authorize(self, user: User, method: str, path: str) -> None:
        """Check that the user may call ``method path``.

        Raises:
            DomainError: UNAUTHORIZED when the user's domain is not allowed.
        """
        allowed = self.authorized_domains
        if not allowed:
            return
        if user.email_domain in allowed or user.hosted_domain.lower() in allowed:
            return

        logger.info(
            "Authorization denied",
            email=user.email,
            method=method,
            path=path,
        )
        raise DomainError(
            ErrorKind.UNAUTHORIZED,
            f"User {user.email} is not authorized for {method} {path}",
        )


# Default authorizer instance
authorizer = Authorizer()
