"""Skill browsing commands for the skilldex CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from skilldex.core.context import SharedContext
from skilldex.core.exceptions import NotFoundError, SkillRegistryError
from skilldex.core.render import render_index, render_prompt_section
from skilldex.utils.config import Config

console = Console()


def load_context(ctx: typer.Context, source: Path | None = None) -> SharedContext:
    """
    Build a SharedContext from the CLI config and load its registry.

    Exits with status 1 if loading fails.
    """
    config: Config = ctx.obj.get("config")
    if source is not None:
        config = config.model_copy(update={"skills_path": source})

    context = SharedContext(config)
    try:
        context.load()
    except SkillRegistryError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    return context


def list_command(ctx: typer.Context, source: Path | None = None) -> None:
    """List all skills in a table."""
    context = load_context(ctx, source)
    listing = context.registry.list()

    table = Table(title=f"Skills: {len(listing)}")
    table.add_column("Identifier", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Path", style="dim")

    for doc in listing:
        table.add_row(
            escape(doc.identifier), escape(doc.description), escape(str(doc.path))
        )

    console.print(table)


def show_command(
    ctx: typer.Context, identifier: str, source: Path | None = None
) -> None:
    """Show detailed information about a skill."""
    context = load_context(ctx, source)

    try:
        doc = context.registry.get(identifier)
    except NotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        console.print("\nAvailable skills:")
        for s in context.registry.list():
            console.print(f"  - {escape(s.identifier)}")
        raise typer.Exit(1)

    console.print(f"[bold cyan]Skill: {escape(doc.identifier)}[/bold cyan]")
    if doc.description:
        console.print(f"Description: {escape(doc.description)}")
    console.print(f"Path: {escape(str(doc.path))}")
    for key, value in doc.metadata.items():
        console.print(f"{escape(str(key))}: {escape(str(value))}")
    console.print()
    console.print(Markdown(doc.body))


def index_command(
    ctx: typer.Context, source: Path | None = None, prompt: bool = False
) -> None:
    """Print the markdown index, or a prompt section when `prompt` is set."""
    context = load_context(ctx, source)
    if not prompt:
        typer.echo(render_index(context.registry.list()))
        return

    section = render_prompt_section(context.registry.list())
    if section is not None:
        typer.echo(section)


def validate_command(ctx: typer.Context, source: Path | None = None) -> None:
    """Load all skills and report success."""
    context = load_context(ctx, source)
    console.print(
        f"[green]OK[/green]: {len(context.registry)} skills in {context.registry.source}",
        soft_wrap=True,
    )
