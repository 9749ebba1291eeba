"""Translate command for the cli-bridge CLI."""

import json
import sys
import uuid
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from cli_bridge.conversion import conversion_metrics
from cli_bridge.conversion.openai_to_cli import openai_to_cli
from cli_bridge.core.config.accessors import log_translation_metrics
from cli_bridge.core.logging import ConversationLogger
from cli_bridge.models.chat import ChatCompletionRequest

conversation_logger = ConversationLogger.get_logger()


def _read_request(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _load_request(console: Console, path: str | None) -> dict[str, Any]:
    try:
        raw = _read_request(path)
    except (OSError, UnicodeDecodeError) as e:
        source = escape(path or "stdin")
        reason = escape(str(getattr(e, "strerror", None) or e))
        console.print(f"[red]❌ Cannot read {source}: {reason}[/red]")
        sys.exit(1)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})[/red]")
        sys.exit(1)

    if not isinstance(data, dict):
        console.print("[red]❌ Request must be a JSON object[/red]")
        sys.exit(1)
    return data


def translate(
    path: str = typer.Argument(
        None, help="Chat completion request JSON file (stdin when omitted or '-')"
    ),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Indent the JSON output"),
) -> None:
    """Translate a chat completion request into CLI invocation parameters."""
    console = Console()
    data = _load_request(console, path)

    user = data.get("user")
    correlation_id = user if isinstance(user, str) and user else uuid.uuid4().hex
    request = ChatCompletionRequest.from_dict(data)
    with ConversationLogger.correlation_context(correlation_id):
        invocation = openai_to_cli(request)
        if log_translation_metrics():
            conversion_metrics.log_translation_metrics(
                conversation_logger,
                conversion_metrics.collect_translation_metrics(request, invocation),
            )

    typer.echo(json.dumps(invocation.to_dict(), indent=2 if pretty else None, ensure_ascii=False))
