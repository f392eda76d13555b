"""CLI commands for exercising the skill locally."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from service_skill_engine.bootstrap import build_default_service_container
from service_skill_engine.core.logging import configure_logging
from service_skill_engine.services.skill_dispatcher import SkillDispatcher

app = typer.Typer(name="skill", help="Run skill events locally")
console = Console()


@app.command("invoke")
def invoke_event(
    event_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON event file"),
    indent: int = typer.Option(2, "--indent", "-i", help="Indentation of the printed reply"),
) -> None:
    """Dispatch a skill event read from a JSON file and print the reply."""
    try:
        event = json.loads(event_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] event file is not valid JSON ({e})")
        raise typer.Exit(1) from e

    # Keep stdout for the reply so it can be piped.
    configure_logging(stream=sys.stderr)
    dispatcher = SkillDispatcher(build_default_service_container())
    result = asyncio.run(dispatcher.handle(event))

    if result.error is not None:
        console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)
    if result.reply is None:
        console.print("[dim]Turn completed with no reply.[/dim]")
        return
    console.print_json(json.dumps(result.reply), indent=indent)


@app.command("catalog")
def show_catalog() -> None:
    """List the services the skill can describe."""
    services = build_default_service_container()

    table = Table(title="Service Catalog")
    table.add_column("Slot value", style="cyan")
    table.add_column("Name")
    table.add_column("Description")
    for entry in services.catalog:
        table.add_row(entry.slot_val, entry.name, entry.description)
    console.print(table)


__all__ = ["app"]
