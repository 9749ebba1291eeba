"""Presenters for model table display in CLI."""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from cli_bridge.models.invocation import ModelTier

TIER_COLORS = {
    ModelTier.OPUS: "magenta",
    ModelTier.SONNET: "cyan",
    ModelTier.HAIKU: "green",
}


class ModelMapPresenter:
    """Renders the model identifier table.

    Presentation only; the table itself comes from the model resolver.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(self, model_map: Mapping[str, ModelTier], default_tier: ModelTier) -> None:
        table = Table(title="Model Mappings")
        table.add_column("Requested Model", style="cyan", no_wrap=True)
        table.add_column("Tier", no_wrap=True)

        for identifier, tier in model_map.items():
            color = TIER_COLORS.get(tier, "white")
            table.add_row(identifier, f"[{color}]{tier.value}[/{color}]")

        self.console.print(table)
        self.console.print(f"Unknown models fall back to [bold]{default_tier.value}[/bold]")
