"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviebase.domain.entities.user import User
from moviebase.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user profile snapshots.

    Stored profiles are never modified. A profile that differs from every
    stored snapshot for the email is inserted as a new row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def list_by_email(self, email: str) -> list[UserModel]:
        """List every stored profile snapshot for an email, oldest first.

        Args:
            email: User email.

        Returns:
            Profile snapshots, empty if the email has none.
        """
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email).order_by(UserModel.id.asc())
        )
        return list(result.scalars().all())

    async def find_profile(self, user: User) -> UserModel | None:
        """Find the snapshot that matches every profile field of the user."""
        result = await self.session.execute(
            select(UserModel)
            .where(
                UserModel.email == user.email,
                UserModel.last_name == user.last_name,
                UserModel.first_name == user.first_name,
                UserModel.full_name == user.full_name,
                UserModel.hosted_domain == user.hosted_domain,
                UserModel.picture_url == user.picture_url,
                UserModel.profile_link == user.profile_link,
            )
            .order_by(UserModel.id.asc())
        )
        return result.scalars().first()

    async def get_or_create_profile(self, user: User) -> UserModel:
        """Return the snapshot for this exact profile, inserting it if new.

        Args:
            user: Domain user.

        Returns:
            The persisted profile snapshot.
        """
        model = await self.find_profile(user)
        if model is not None:
            return model

        model = UserModel(
            email=user.email,
            last_name=user.last_name,
            first_name=user.first_name,
            full_name=user.full_name,
            hosted_domain=user.hosted_domain,
            picture_url=user.picture_url,
            profile_link=user.profile_link,
        )
        self.session.add(model)
        await self.session.flush()
        return model


def to_domain_user(model: UserModel) -> User:
    """Map a user row to the domain value object."""
    return User(
        email=model.email,
        last_name=model.last_name,
        first_name=model.first_name,
        full_name=model.full_name,
        hosted_domain=model.hosted_domain,
        picture_url=model.picture_url,
        profile_link=model.profile_link,
    )
