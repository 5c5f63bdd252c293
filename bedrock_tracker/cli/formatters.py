"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bedrock_tracker.core.merger import MergeOutcome
from bedrock_tracker.core.orchestrator import RunResult
from bedrock_tracker.models.config import TrackerConfig
from bedrock_tracker.models.ledger import Channel, Ledger


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "FetchError": [
            "• Check your internet connection.",
            "• The download-links API might be temporarily unavailable.",
            "• Verify `api_url` in your configuration or --api-url.",
        ],
        "MissingDownloadLink": [
            "• The API no longer lists one of the expected server downloads.",
            "• Mojang may have renamed a download type; check the raw API response.",
        ],
        "ExtractionError": [
            "• A download link no longer ends in bedrock-server-<version>.zip.",
            "• The upstream naming scheme may have changed.",
        ],
        "VersionMismatch": [
            "• Windows and Linux builds were published with different versions.",
            "• This is usually temporary during a rollout. Try again later.",
        ],
        "InvalidVersionFormat": [
            "• The version in a download link has fewer than two numeric parts.",
        ],
        "ConfigurationError": [
            "• Fix the reported setting in your config file.",
            "• Run `bedrock-tracker init --force` to regenerate it.",
        ],
        "LedgerWriteError": [
            "• Check that the ledger directory exists and is writable.",
            "• Check free disk space.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config: TrackerConfig):
    """Displays the effective configuration."""
    console = Console()
    content = ""
    for key in sorted(TrackerConfig.get_ini_keys()):
        content += f"{key} = {getattr(config, key)}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_run_summary(result: RunResult, ledger_path: Path, dry_run: bool = False):
    """Displays the per-channel outcome of an update run."""
    console = Console()
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Channel")
    table.add_column("Version")
    table.add_column("Raw", style="dim")
    table.add_column("Status")

    for r in result.channels:
        if r.outcome is MergeOutcome.ADDED:
            status = "[green]new[/green]"
        else:
            status = "[dim]already known[/dim]"
        table.add_row(r.channel.label, f"v{r.version}", r.raw_version, status)

    if dry_run:
        footer = "[yellow]Dry run: ledger not written.[/yellow]"
    elif result.changed:
        footer = f"[green]✓ Ledger updated: {ledger_path}[/green]"
    else:
        footer = f"[dim]Ledger unchanged: {ledger_path}[/dim]"

    console.print(
        Panel(
            table,
            title="[bold]Bedrock Server Versions[/bold]",
            subtitle=footer,
            border_style="cyan",
            expand=False,
        )
    )


def print_ledger(ledger: Ledger, channels: list[Channel] | None = None):
    """Displays the recorded versions of each channel, newest first."""
    console = Console()
    for channel in channels or list(Channel):
        section = ledger.section(channel)
        latest = ledger.latest(channel)

        if not section:
            console.print(f"[dim]No {channel.label.lower()} versions recorded.[/dim]")
            continue

        table = Table(
            title=f"{channel.label} ({len(section)} versions)",
            box=box.SIMPLE_HEAVY,
            header_style="bold cyan",
        )
        table.add_column("Version", style="bold")
        table.add_column("Windows", overflow="fold")
        table.add_column("Linux", overflow="fold")

        for version in ledger.sorted_versions(channel):
            record = section[version]
            label = f"[green]{version} (latest)[/green]" if version == latest else version
            table.add_row(label, record.windows.url, record.linux.url)
        console.print(table)
