"""Post commands for the blog fixtures CLI.

This module provides commands for listing, showing and exporting the
fixture posts.
"""

from pathlib import Path
from typing import Optional

import typer

from .. import data
from ..app import handle_exceptions

app = typer.Typer()

POST_COLUMNS = ["title", "permalink_id", "tags"]


@app.command("list")
@handle_exceptions
def list_posts(
    ctx: typer.Context,
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only list posts carrying this tag"),
) -> None:
    """List fixture posts in declaration order.

    Examples:
        # List all posts
        blogfixtures posts list

        # List posts tagged css
        blogfixtures posts list --tag css
    """
    formatter = ctx.obj["output_formatter"]

    selected = data.posts_tagged(tag) if tag else data.posts()
    if ctx.obj["debug"]:
        ctx.obj["console"].print(f"[dim]{len(selected)} of {len(data.posts())} posts selected[/dim]")

    formatter.render(
        [post.to_dict() for post in selected],
        format=ctx.obj["output_format"],
        columns=POST_COLUMNS,
        title="Posts",
    )


@app.command()
@handle_exceptions
def get(
    ctx: typer.Context,
    permalink_id: str = typer.Argument(..., help="Permalink id of the post"),
) -> None:
    """Show a single fixture post.

    Examples:
        blogfixtures posts get hello-world
    """
    formatter = ctx.obj["output_formatter"]
    post = data.get_post(permalink_id)
    formatter.render(
        post.to_dict(),
        format=ctx.obj["output_format"],
        columns=POST_COLUMNS,
        title=post.title,
    )


@app.command()
@handle_exceptions
def export(
    ctx: typer.Context,
    output_file: Path = typer.Argument(..., help="File to write (.json, .yaml or .yml)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Export format (json, yaml); defaults to the file extension"),
) -> None:
    """Export the fixture posts to a JSON or YAML file.

    Examples:
        blogfixtures posts export posts.json
        blogfixtures posts export fixtures.txt --format yaml
    """
    formatter = ctx.obj["output_formatter"]
    console = ctx.obj["console"]

    records = [post.to_dict() for post in data.posts()]
    written = formatter.render_to_file({"posts": records}, output_file, format=format)
    console.print(f"[green]Exported {len(records)} posts to {written}[/green]")
