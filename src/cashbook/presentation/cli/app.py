"""Cashbook CLI application using Typer.

Operational utilities: secret generation, role management for users that
already logged in once, session cleanup and running the API server.
"""

import asyncio
import secrets

import typer
from rich.console import Console
from rich.table import Table

from cashbook.domain.shared.time import utc_now
from cashbook.domain.user import User, UserRole
from cashbook.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from cashbook_config.settings import get_settings

app = typer.Typer(
    name="cashbook",
    help="Cashbook - income and expense tracking CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
users_app = typer.Typer(
    name="users",
    help="User and role management",
    no_args_is_help=True,
)
sessions_app = typer.Typer(
    name="sessions",
    help="Login session maintenance",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(users_app)
app.add_typer(sessions_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Cashbook configuration.

    Copy the output to your .env file. GitHub OAuth credentials come from
    the OAuth app registered on GitHub and are not generated here.
    """
    console.print("\n[bold green]Cashbook Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _set_role(email: str, role: UserRole) -> User | None:
    database = Database(get_settings().database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            repo = SQLAlchemyRepositoryFactory(session).user_repository()
            user = await repo.find_by_email(email)
            if user is None:
                return None
            user.change_role(role)
            await repo.save(user)
            await session.commit()
            return user
    finally:
        await database.dispose()


async def _list_users() -> list[User]:
    database = Database(get_settings().database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            repo = SQLAlchemyRepositoryFactory(session).user_repository()
            return await repo.list_all()
    finally:
        await database.dispose()


async def _prune_sessions() -> int:
    database = Database(get_settings().database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            repo = SQLAlchemyRepositoryFactory(session).session_repository()
            removed = await repo.delete_expired(utc_now())
            await session.commit()
            return removed
    finally:
        await database.dispose()


def _change_role(email: str, role: UserRole) -> None:
    user = asyncio.run(_set_role(email, role))
    if user is None:
        console.print(f"[red]No user with email {email}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{user.email}[/green] is now [bold]{role.value}[/bold]")


@users_app.command("promote")
def promote_user(
    email: str = typer.Argument(..., help="Email of a user who has logged in"),
) -> None:
    """Give a user the ADMIN role."""
    _change_role(email, UserRole.ADMIN)


@users_app.command("demote")
def demote_user(
    email: str = typer.Argument(..., help="Email of the user to demote"),
) -> None:
    """Give a user the USER role."""
    _change_role(email, UserRole.USER)


@users_app.command("list")
def list_users() -> None:
    """Show every user with their role."""
    users = asyncio.run(_list_users())
    if not users:
        console.print("[dim]No users yet.[/dim]")
        return

    table = Table(title="Users")
    table.add_column("Name")
    table.add_column("Email", style="cyan")
    table.add_column("Role")
    table.add_column("Created", style="dim")
    for user in users:
        role_style = "bold magenta" if user.is_admin else ""
        table.add_row(
            user.name,
            user.email,
            f"[{role_style}]{user.role.value}[/{role_style}]"
            if role_style
            else user.role.value,
            user.created_at.date().isoformat(),
        )
    console.print(table)


@sessions_app.command("prune")
def prune_sessions() -> None:
    """Delete expired login sessions."""
    removed = asyncio.run(_prune_sessions())
    console.print(f"Removed [bold]{removed}[/bold] expired session(s)")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn  # noqa: PLC0415

    settings = get_settings()
    uvicorn.run(
        "cashbook.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
