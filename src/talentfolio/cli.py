"""Command-line interface for Talentfolio.

This module provides the CLI commands for running and maintaining
the Talentfolio service.
"""

import asyncio
from datetime import timedelta

import click

from talentfolio import __version__
from talentfolio.core.config import get_settings
from talentfolio.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="Talentfolio")
def cli() -> None:
    """Talentfolio - invite-only talent portfolio service.

    Settings are read from TALENTFOLIO_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (defaults to on in development)",
)
def serve(host: str | None, port: int | None, reload: bool | None) -> None:
    """Start the Talentfolio API server."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port
    if reload is None:
        reload = settings.is_development

    configure_logging(settings)
    get_logger(__name__).info(
        "Starting Talentfolio server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "talentfolio.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Run even in production")
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, use migrations instead.
    """
    from talentfolio.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
        finally:
            await db.disconnect()

    asyncio.run(initialize())
    click.echo("Database initialized successfully.")


@cli.command("create-admin")
@click.option("--email", type=str, required=True, help="Administrator email")
@click.option(
    "--password",
    type=str,
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Administrator password (prompts if not provided)",
)
def create_admin(email: str, password: str) -> None:
    """Create an administrator, or promote an existing user.

    The password is replaced when the user already exists.
    """
    from email_validator import EmailNotValidError, validate_email

    from talentfolio.infrastructure.persistence.database import (
        bootstrap_admin,
        get_db_manager,
    )

    configure_logging(get_settings())

    try:
        email = validate_email(email, check_deliverability=False).normalized.lower()
    except EmailNotValidError as e:
        click.echo(f"Error: Invalid email address: {e}", err=True)
        raise SystemExit(1)

    if len(password) < 8:
        click.echo("Error: Password must be at least 8 characters", err=True)
        raise SystemExit(1)

    async def create() -> str:
        db = get_db_manager()
        try:
            await db.create_tables()
            return await bootstrap_admin(db, email, password)
        finally:
            await db.disconnect()

    user_id = asyncio.run(create())
    click.echo(f"Administrator ready.\n  User ID: {user_id}\n  Email:   {email}")


@cli.command("prune-invites")
@click.option(
    "--older-than-days",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Only delete invites that expired at least this many days ago",
)
def prune_invites(older_than_days: int) -> None:
    """Delete unused invites that have expired. Used invites are kept."""
    from talentfolio.domain.services import InviteService
    from talentfolio.infrastructure.persistence.database import get_db_manager
    from talentfolio.infrastructure.persistence.repositories import InviteTokenRepository

    configure_logging(get_settings())

    async def prune() -> int:
        db = get_db_manager()
        try:
            async with db.session() as session:
                service = InviteService(session, InviteTokenRepository(session))
                return await service.prune_expired(timedelta(days=older_than_days))
        finally:
            await db.disconnect()

    deleted = asyncio.run(prune())
    click.echo(f"Deleted {deleted} expired invite(s).")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
