# notarize_tool/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel

from ...constants import EMOJI_ERROR, EMOJI_SUCCESS
from ...models import NotarizeResult

console = Console()
err_console = Console(stderr=True)


def format_notarize_result(result: NotarizeResult) -> None:
    """Format and display notarization result"""
    if result.is_success:
        lines = [
            f"[green]{EMOJI_SUCCESS}[/green] Notarization accepted!",
            f"",
            f"[bold]Product:[/bold] {result.product_path}",
        ]

        if result.duration is not None:
            lines.append(f"[bold]Duration:[/bold] {_format_duration(result.duration)}")

        panel = Panel(
            "\n".join(lines),
            title="Notarize Result",
            border_style="green"
        )
        console.print(panel)

    else:
        lines = [f"[red]{EMOJI_ERROR} {result.message}[/red]"]

        if result.failure_kind:
            lines.append("")
            lines.append(f"[bold]Stage:[/bold] {result.failure_kind.value}")

        if result.submission and result.submission.exit_code is not None:
            lines.append(f"[bold]notarytool exit code:[/bold] {result.submission.exit_code}")

        panel = Panel(
            "\n".join(lines),
            title="Notarize Error",
            border_style="red"
        )
        console.print(panel)


def format_json(data: Any) -> None:
    """Write JSON data to stdout"""
    click.echo(json.dumps(data, indent=2, default=str))


def _format_duration(seconds: float) -> str:
    """Format duration in human-readable format"""
    minutes, seconds = divmod(int(round(seconds)), 60)
    if minutes:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
