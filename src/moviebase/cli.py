"""Command-line interface for MovieBase.

This module provides the CLI commands for running and managing
the MovieBase application.
"""

from typing import NoReturn

import click

from moviebase import __version__
from moviebase.core.config import get_settings
from moviebase.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="MovieBase")
def cli() -> None:
    """MovieBase - a movie catalogue API.

    Settings are read from MOVIEBASE_* environment variables and .env.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the MovieBase server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.database_url.startswith("sqlite"):
        click.echo(
            "ERROR: SQLite does not support multiple worker processes. "
            "Use --workers 1 or switch to PostgreSQL.",
            err=True,
        )
        raise SystemExit(1)

    # Configure logging before starting server
    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting MovieBase server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "moviebase.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt (required in production)",
)
def init_db(force: bool) -> None:
    """Create the users and movies tables.

    Use this in development. In production, run the Alembic migrations.
    """
    import asyncio

    from moviebase.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await init_database()
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option("--email", type=str, required=True, help="User email")
@click.option("--first-name", type=str, required=True, help="Given name")
@click.option("--last-name", type=str, required=True, help="Family name")
@click.option("--full-name", type=str, default=None, help="Full name (defaults to first + last)")
@click.option("--hosted-domain", type=str, default="", help="Hosted domain")
@click.option("--picture-url", type=str, default="", help="Profile picture URL")
@click.option("--profile-link", type=str, default="", help="Profile link")
@click.option(
    "--expires-minutes",
    type=int,
    default=None,
    help="Token lifetime in minutes (defaults to config)",
)
def issue_token(
    email: str,
    first_name: str,
    last_name: str,
    full_name: str | None,
    hosted_domain: str,
    picture_url: str,
    profile_link: str,
    expires_minutes: int | None,
) -> None:
    """Issue an access token for a user profile.

    The token is signed with the configured secret key and can be sent as
    ``Authorization: Bearer <token>``.
    """
    from datetime import timedelta

    from moviebase.domain.entities.user import User
    from moviebase.infrastructure.auth import jwt_service

    user = User(
        email=email,
        last_name=last_name,
        first_name=first_name,
        full_name=full_name or f"{first_name} {last_name}",
        hosted_domain=hosted_domain,
        picture_url=picture_url,
        profile_link=profile_link,
    )
    if not user.is_valid():
        click.echo("Error: email, first name, last name and full name are required", err=True)
        raise SystemExit(1)

    expires_delta = timedelta(minutes=expires_minutes) if expires_minutes else None
    click.echo(jwt_service.create_access_token(user, expires_delta=expires_delta))


@cli.command()
def info() -> None:
    """Display MovieBase configuration and system information."""
    settings = get_settings()
    domains = ", ".join(settings.authorized_domains) or "(any)"

    click.echo(f"""
MovieBase v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Security:
  Token Expire: {settings.access_token_expire_minutes} minutes
  Domains:      {domains}

Movies:
  ID Bytes:     {settings.external_id_bytes}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `moviebase` command is run
    or when using `python -m moviebase`.
    """
    cli()


if __name__ == "__main__":
    main()
