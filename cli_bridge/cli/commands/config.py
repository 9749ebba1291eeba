"""Configuration commands for the cli-bridge CLI."""

import sys

import typer
from rich.console import Console

from cli_bridge.cli.presenters.config import ConfigPresenter
from cli_bridge.core.config import Config, ConfigError, validate_all

app = typer.Typer(help="Configuration management")


@app.command()
def show() -> None:
    """Show the effective configuration."""
    presenter = ConfigPresenter(Console())
    try:
        config = Config()
    except ConfigError as e:
        presenter.present_errors([e])
        sys.exit(1)
    presenter.present_config(config)


@app.command()
def validate() -> None:
    """Validate configuration environment variables."""
    errors = validate_all()
    ConfigPresenter(Console()).present_errors(errors)
    if errors:
        sys.exit(1)
