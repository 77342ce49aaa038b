"""Taskboard CLI application using Typer.

Provides the ``serve`` command that runs the API under uvicorn and
secret generation for deployment configuration.
"""

import secrets

import typer
import uvicorn
from rich.console import Console

from taskboard.presentation.api.app import create_app
from taskboard_config.settings import get_settings

app = typer.Typer(
    name="taskboard",
    help="Taskboard - personal task API",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server.

    The listener is up before the database connection attempt resolves.
    Exits with code 1 when a production start fails to reach the database.
    """
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]{settings.app_name}[/bold green] on "
        f"[cyan]http://{bind_host}:{bind_port}[/cyan] "
        f"([dim]{settings.environment.value}[/dim])"
    )
    if reload:
        uvicorn.run(
            "taskboard.presentation.api.app:create_app",
            factory=True,
            host=bind_host,
            port=bind_port,
            reload=True,
            log_config=None,
        )
        return

    api = create_app(settings)
    uvicorn.run(api, host=bind_host, port=bind_port, log_config=None)
    # 1 when the server stopped itself after a fatal startup failure
    if api.state.exit_code:
        raise typer.Exit(code=api.state.exit_code)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a token signing secret for Taskboard configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Taskboard Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
