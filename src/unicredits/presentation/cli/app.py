"""``unicredits`` command line: deployment secrets and schema management."""

import asyncio
import secrets
from typing import Optional

import typer
from rich.console import Console
from sqlalchemy.engine import make_url

from unicredits.infrastructure.persistence.sqlalchemy.init_db import init_database
from unicredits_config.settings import get_settings

app = typer.Typer(
    name="unicredits",
    help="UniCredits - academic credit and GPA tracker CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

DatabaseUrlOption = typer.Option(
    None,
    "--database-url",
    help="SQLAlchemy async URL; defaults to the configured database",
)


def _target_url(database_url: Optional[str]) -> str:
    return database_url or get_settings().database_url


def _masked(url: str) -> str:
    return make_url(url).render_as_string(hide_password=True)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Print the two required secrets in .env format."""
    console.print("[bold green]UniCredits secrets[/bold green]")
    # 64 bytes for the HS256 signing key
    console.print(f"JWT_SECRET_KEY={secrets.token_urlsafe(64)}", soft_wrap=True)
    console.print(f"POSTGRES_PASSWORD={secrets.token_urlsafe(32)}", soft_wrap=True)
    console.print(
        "[dim]Put these in config/.env or config/.env.dev; "
        "never commit them.[/dim]",
    )


@db_app.command("init")
def db_init(database_url: Optional[str] = DatabaseUrlOption) -> None:
    """Create missing tables. Existing data is left untouched."""
    url = _target_url(database_url)
    asyncio.run(init_database(reset=False, database_url=url))
    console.print(f"[green]Schema is up to date on {_masked(url)}[/green]")


@db_app.command("reset")
def db_reset(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
    database_url: Optional[str] = DatabaseUrlOption,
) -> None:
    """Drop and recreate all tables. ALL DATA IS LOST."""
    url = _target_url(database_url)
    if not yes:
        typer.confirm(
            f"This deletes every user, category and course on {_masked(url)}. Continue?",
            abort=True,
        )
    asyncio.run(init_database(reset=True, database_url=url))
    console.print(f"[green]Database reset on {_masked(url)}[/green]")


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
