"""Main CLI entry point for cli-bridge."""

import typer
from rich.console import Console

from cli_bridge.cli.commands import config, models, translate
from cli_bridge.core.logging import configure_root_logging

app = typer.Typer(
    name="cli-bridge",
    help="Translate OpenAI chat requests into single-turn CLI invocations",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(config.app, name="config", help="Configuration management")
app.command("translate")(translate.translate)
app.command("models")(models.models)
app.command("resolve")(models.resolve)


@app.command()
def version() -> None:
    """Show version information."""
    from cli_bridge import __version__

    console = Console()
    console.print(f"[bold cyan]cli-bridge[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """cli-bridge CLI."""
    configure_root_logging("DEBUG" if verbose else None)


if __name__ == "__main__":
    app()
