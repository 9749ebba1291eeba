"""Model table commands for the cli-bridge CLI."""

import typer
from rich.console import Console

from cli_bridge.cli.presenters.models import ModelMapPresenter
from cli_bridge.conversion.model_resolver import DEFAULT_MODEL_TIER, MODEL_MAP, extract_model


def models() -> None:
    """Show the model identifier to tier table."""
    ModelMapPresenter(Console()).present(MODEL_MAP, DEFAULT_MODEL_TIER)


def resolve(model: str = typer.Argument(..., help="Model identifier to resolve")) -> None:
    """Print the tier a model identifier resolves to."""
    typer.echo(extract_model(model).value)
