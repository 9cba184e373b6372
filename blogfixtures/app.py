"""Main Typer application for the blog fixtures CLI.

This module contains the main Typer app instance and registers all command
groups. It handles global options like debug mode and output formatting and
loads display settings from the config file and environment.
"""

import functools
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install

from . import __version__
from .config import ConfigManager
from .render import OutputFormatter, FORMATS
from .exceptions import BlogFixturesError, ConfigError, ValidationError
from .utils.exceptions import format_error_for_user

# Install rich traceback handler for better error display
install(show_locals=False)

app = typer.Typer(
    name="blogfixtures",
    help="Inspect and export the blog post fixture set",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
config_manager = ConfigManager()

_commands_registered = False


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"blogfixtures {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format (table, json, yaml)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Blog fixtures - the posts the site automation tests expect to find.

    Examples:
        # List all fixture posts
        blogfixtures posts list

        # Show a single post as JSON
        blogfixtures -o json posts get hello-world

        # Export the fixture set
        blogfixtures posts export posts.yaml
    """
    if output_format and output_format.lower() not in FORMATS:
        error = ValidationError(f"Unknown output format: {output_format}")
        console.print(f"[red]{escape(format_error_for_user(error, debug))}[/red]")
        raise typer.Exit(1)

    try:
        settings = config_manager.load()
    except ConfigError as e:
        console.print(f"[red]{escape(format_error_for_user(e, debug))}[/red]")
        raise typer.Exit(1)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["output_format"] = output_format.lower() if output_format else None
    ctx.obj["console"] = console
    ctx.obj["settings"] = settings
    ctx.obj["output_formatter"] = OutputFormatter(
        console,
        default_format=settings.output_format,
        theme=settings.table_theme,
        colors=settings.colors,
    )

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")
        source = config_manager.config_file if config_manager.config_file.exists() else "defaults"
        console.print(f"[dim]Settings loaded from: {source}[/dim]")


def handle_exceptions(func):
    """Decorator to handle common exceptions in commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BlogFixturesError as e:
            ctx = kwargs.get("ctx")
            debug = ctx.obj.get("debug", False) if ctx is not None and ctx.obj else False
            console.print(f"[red]{escape(format_error_for_user(e, debug))}[/red]")
            if not debug:
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(130)
    return wrapper


def register_commands() -> None:
    """Register all command groups with the main app."""
    global _commands_registered
    if _commands_registered:
        return

    from .cmds import posts_app, tags_app

    app.add_typer(posts_app, name="posts", help="Inspect and export fixture posts")
    app.add_typer(tags_app, name="tags", help="Inspect fixture tags")
    _commands_registered = True


def cli():
    """Entry point for the CLI."""
    register_commands()

    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
