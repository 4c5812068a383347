"""SQLAlchemy model for the movies table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviebase.infrastructure.persistence.database import Base
from moviebase.infrastructure.persistence.models.user import UserModel


class MovieModel(Base):
    """SQLAlchemy model for the movies table.

    Attributes:
        movie_id: Internal UUID (string form).
        extl_id: External identifier, unique.
        title, rated, director, writer: Movie attributes.
        released: Release date-time.
        run_time: Run time in minutes.
        create_user_id / update_user_id: Profile snapshots in users.
        create_timestamp / update_timestamp: Audit timestamps.
    """

    __tablename__ = "movies"

    movie_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Internal movie ID (UUID)",
    )
    extl_id: Mapped[str] = mapped_column(
        String(250),
        nullable=False,
        unique=True,
        comment="External movie ID",
    )
    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    rated: Mapped[str] = mapped_column(String(10), nullable=False)
    released: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    run_time: Mapped[int] = mapped_column(Integer, nullable=False)
    director: Mapped[str] = mapped_column(String(1000), nullable=False)
    writer: Mapped[str] = mapped_column(String(1000), nullable=False)
    create_user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
    )
    create_timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    update_user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
    )
    update_timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Relationships
    create_user: Mapped[UserModel] = relationship(
        UserModel,
        foreign_keys=[create_user_id],
        lazy="selectin",
    )
    update_user: Mapped[UserModel] = relationship(
        UserModel,
        foreign_keys=[update_user_id],
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_movies_create_timestamp", "create_timestamp"),
    )

    def __repr__(self) -> str:
        return f"<Movie(extl_id={self.extl_id}, title={self.title})>"
