"""Content type commands for ShepherdPress CLI."""

import typer

from ..content_types import ContentTypeRegistry
from ..exceptions import ShepherdPressError
from .settings import fail

app = typer.Typer()


@app.command("list")
def list_types(ctx: typer.Context) -> None:
    """List the content types the theme registers.

    Examples:
        shepherdpress types list
        shepherdpress types list --output json
    """
    registry: ContentTypeRegistry = ctx.obj["content_types"]
    rows = [
        {
            "name": definition.name,
            "label": definition.labels.name,
            "public": definition.public,
            "has_archive": definition.has_archive,
            "hierarchical": definition.hierarchical,
            "capability_type": definition.capability_type,
        }
        for definition in registry.all()
    ]
    try:
        ctx.obj["output_formatter"].render(rows, format=ctx.obj["output_format"], title="Content Types")
    except ShepherdPressError as e:
        fail(ctx, e)
