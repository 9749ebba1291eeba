"""Presenters for configuration display in CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli_bridge.core.config import Config, ConfigError
from cli_bridge.core.config.schema import ConfigSchema


class ConfigPresenter:
    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present_config(self, config: Config) -> None:
        table = Table(title="cli-bridge Configuration")
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row(ConfigSchema.LOG_LEVEL.name, config.log_level)
        table.add_row(
            ConfigSchema.LOG_TRANSLATION_METRICS.name, str(config.log_translation_metrics)
        )
        self.console.print(table)

    def present_errors(self, errors: list[ConfigError]) -> None:
        if not errors:
            self.console.print("[green]✅ Configuration is valid[/green]")
            return
        for error in errors:
            detail = escape(f"{error.message} (got {error.value!r})")
            self.console.print(f"[red]❌ {error.env_var}: {detail}[/red]")
