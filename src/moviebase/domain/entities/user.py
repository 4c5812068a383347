"""User value object for the authenticated principal.

Users are produced by converting a bearer access token and are attached
to movies as the create and update user.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Authenticated user profile.

    Attributes:
        email: User's email address. Also used as the username.
        last_name: Family name.
        first_name: Given name.
        full_name: Display name.
        hosted_domain: Hosted (organization) domain, if any.
        picture_url: Profile picture URL.
        profile_link: Profile page URL.
    """

    email: str
    last_name: str = ""
    first_name: str = ""
    full_name: str = ""
    hosted_domain: str = ""
    picture_url: str = ""
    profile_link: str = ""

    def is_valid(self) -> bool:
        """A user is valid when email and all name fields have a value."""
        return all((self.email, self.last_name, self.first_name, self.full_name))

    @property
    def email_domain(self) -> str:
        """Domain portion of the email address (lowercased)."""
        _, _, domain = self.email.rpartition("@")
        return domain.lower()
