"""CLI commands for service-skill-engine."""

import typer

from service_skill_engine.cli.skill import app as skill_app

main_app = typer.Typer(
    name="service-skill",
    help="Service Skill Engine CLI",
    no_args_is_help=True,
)
main_app.add_typer(skill_app, name="skill")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
