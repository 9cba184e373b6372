"""Tag commands for the blog fixtures CLI."""

import typer

from .. import data
from ..app import handle_exceptions

app = typer.Typer()


@app.command("list")
@handle_exceptions
def list_tags(ctx: typer.Context) -> None:
    """List the distinct tags used by the fixture posts, with post counts.

    Examples:
        blogfixtures tags list
        blogfixtures -o yaml tags list
    """
    formatter = ctx.obj["output_formatter"]
    rows = [{"tag": tag, "posts": len(data.posts_tagged(tag))} for tag in data.tags()]
    formatter.render(rows, format=ctx.obj["output_format"], columns=["tag", "posts"], title="Tags")
