"""create_users_and_movies

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:41.508213

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Profile snapshot ID",
        ),
        sa.Column(
            "email",
            sa.String(length=320),
            nullable=False,
            comment="User email, also used as username",
        ),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("hosted_domain", sa.String(length=255), nullable=False),
        sa.Column("picture_url", sa.String(length=2048), nullable=False),
        sa.Column("profile_link", sa.String(length=2048), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=False)

    op.create_table(
        "movies",
        sa.Column(
            "movie_id",
            sa.String(length=36),
            nullable=False,
            comment="Internal movie ID (UUID)",
        ),
        sa.Column(
            "extl_id",
            sa.String(length=250),
            nullable=False,
            comment="External movie ID",
        ),
        sa.Column("title", sa.String(length=1000), nullable=False),
        sa.Column("rated", sa.String(length=10), nullable=False),
        sa.Column("released", sa.DateTime(timezone=True), nullable=False),
        sa.Column("run_time", sa.Integer(), nullable=False),
        sa.Column("director", sa.String(length=1000), nullable=False),
        sa.Column("writer", sa.String(length=1000), nullable=False),
        sa.Column("create_user_id", sa.Integer(), nullable=False),
        sa.Column("create_timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("update_user_id", sa.Integer(), nullable=False),
        sa.Column("update_timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["create_user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["update_user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("movie_id"),
        sa.UniqueConstraint("extl_id"),
    )
    op.create_index(
        "ix_movies_create_timestamp",
        "movies",
        ["create_timestamp"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_movies_create_timestamp", table_name="movies")
    op.drop_table("movies")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
