"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from bedrock_tracker import __version__
from bedrock_tracker.api.client import BedrockLinksClient
from bedrock_tracker.core.orchestrator import process_links
from bedrock_tracker.exceptions import BedrockTrackerError
from bedrock_tracker.models.config import TrackerConfig
from bedrock_tracker.models.ledger import Channel
from bedrock_tracker.storage.config_manager import ConfigManager
from bedrock_tracker.storage.ledger_store import LedgerStore

from .formatters import (
    format_error_with_suggestions,
    print_config,
    print_ledger,
    print_run_summary,
)

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("bedrock_tracker")

app = typer.Typer(
    name="bedrock-tracker",
    help=(
        "Keeps a local record of every published Minecraft Bedrock server"
        " download. Use 'bedrock-tracker <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "bedrock-tracker"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


def _config_file(ctx: typer.Context) -> Path:
    return (ctx.obj or {}).get("config_file", CONFIG_FILE)


def _load_config(ctx: typer.Context, **cli_options) -> TrackerConfig:
    try:
        return ConfigManager(_config_file(ctx)).load_config(cli_options)
    except BedrockTrackerError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the INI configuration file.",
        dir_okay=False,
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the effective configuration."
    ),
):
    """Bedrock Server Download Tracker"""
    if version:
        console.print(
            f"[bold]bedrock-tracker[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("bedrock_tracker").setLevel(log_level)

    ctx.obj = {"config_file": config_file or CONFIG_FILE}

    if show_config:
        config = _load_config(ctx)
        print_config(_config_file(ctx), config)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    ctx: typer.Context,
    ledger: Path | None = typer.Option(
        None, "--ledger", "-l", help="Where to keep the version ledger."
    ),
    api_url: str | None = typer.Option(
        None, "--api-url", help="Download-links API endpoint."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing config without asking."
    ),
):
    """Write a configuration file with default settings."""
    config_file = _config_file(ctx)
    if (
        config_file.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {
        "ledger_path": str(ledger) if ledger else None,
        "api_url": api_url,
    }
    try:
        ConfigManager(config_file).save_new_config(settings)
    except BedrockTrackerError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{config_file}'[/bold green]")


@app.command()
def update(
    ctx: typer.Context,
    ledger: Path | None = typer.Option(
        None, "--ledger", "-l", help="Path to the version ledger (JSON)."
    ),
    api_url: str | None = typer.Option(
        None, "--api-url", help="Override the download-links API endpoint."
    ),
    timeout: int | None = typer.Option(
        None, "--timeout", "-t", help="Request timeout in seconds."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Report what would change without writing."
    ),
):
    """Fetch the current download links and record any new versions."""
    config = _load_config(
        ctx,
        ledger_path=str(ledger) if ledger else None,
        api_url=api_url,
        timeout=timeout,
        dry_run=dry_run,
    )

    async def _fetch_async() -> dict[str, str]:
        async with BedrockLinksClient(
            config.api_url, config.user_agent, config.timeout
        ) as client:
            return await client.fetch_links()

    ledger_path = Path(config.ledger_path)
    store = LedgerStore(ledger_path)
    try:
        raw_links = asyncio.run(_fetch_async())
        result = process_links(raw_links, store.load())
        if not config.dry_run:
            store.save(result.ledger)
    except BedrockTrackerError as e:
        log.debug("Run aborted, ledger not written.", exc_info=True)
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    log.info("All versions processed successfully.")
    print_run_summary(result, ledger_path, dry_run=config.dry_run)


@app.command(name="list")
def list_command(
    ctx: typer.Context,
    ledger: Path | None = typer.Option(
        None, "--ledger", "-l", help="Path to the version ledger (JSON)."
    ),
    channel: Channel | None = typer.Option(
        None, "--channel", help="Only show one channel (release or preview)."
    ),
):
    """Show the versions recorded in the ledger."""
    config = _load_config(ctx, ledger_path=str(ledger) if ledger else None)
    recorded = LedgerStore(Path(config.ledger_path)).load()
    print_ledger(recorded, [channel] if channel else None)
