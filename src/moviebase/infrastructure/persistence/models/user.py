"""SQLAlchemy model for the users table.

Each row is a snapshot of a user profile as carried by an access token.
Rows are insert-only: a changed profile gets a new row, so a movie keeps
the create and update profiles it was written with.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from moviebase.infrastructure.persistence.database import Base


class UserModel(Base):
    """SQLAlchemy model for user profile snapshots."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Profile snapshot ID",
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        comment="User email, also used as username",
    )
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    hosted_domain: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    picture_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    profile_link: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("ix_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
