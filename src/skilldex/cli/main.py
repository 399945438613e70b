"""CLI interface for skilldex using Typer."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from skilldex.cli.server import serve_command
from skilldex.cli.skills import (
    index_command,
    list_command,
    show_command,
    validate_command,
)
from skilldex.utils.config import Config

app = typer.Typer(
    name="skilldex",
    help="Skilldex: load, validate and browse markdown skill documents",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

SourceOption = Annotated[
    Path | None,
    typer.Option(
        "--source",
        "-s",
        help="Skills directory (overrides skills_path from config)",
    ),
]


# Global config option callback
def load_config_callback(ctx: typer.Context, workspace: str):
    """Load configuration and store it in the context."""
    if ctx.resilient_parsing:
        return workspace

    try:
        cfg = Config.load(Path(workspace))
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg
    except Exception as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(1)

    return workspace


@app.callback()
def main(
    ctx: typer.Context,
    workspace: str = typer.Option(
        str(Path.home() / ".skilldex"),
        "--workspace",
        "-w",
        help="Path to workspace directory",
        callback=load_config_callback,
    ),
) -> None:
    """
    Skilldex: load, validate and browse markdown skill documents.

    Configuration is loaded from ~/.skilldex/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    # Config is loaded via callback, nothing to do here
    pass


@app.command("list")
def list_skills(ctx: typer.Context, source: SourceOption = None) -> None:
    """List all skills."""
    list_command(ctx, source)


@app.command()
def show(
    ctx: typer.Context,
    identifier: Annotated[str, typer.Argument(help="Skill identifier")],
    source: SourceOption = None,
) -> None:
    """Show a skill's description and body."""
    show_command(ctx, identifier, source)


@app.command()
def index(
    ctx: typer.Context,
    source: SourceOption = None,
    prompt: Annotated[
        bool,
        typer.Option("--prompt", help="Render as a prompt section with file paths"),
    ] = False,
) -> None:
    """Print a markdown index of all skills."""
    index_command(ctx, source, prompt=prompt)


@app.command()
def validate(ctx: typer.Context, source: SourceOption = None) -> None:
    """Load every skill and report the first error, if any."""
    validate_command(ctx, source)


@app.command()
def serve(ctx: typer.Context, source: SourceOption = None) -> None:
    """Serve the skill registry over HTTP."""
    serve_command(ctx, source)


if __name__ == "__main__":
    app()
