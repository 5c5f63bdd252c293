"""
Main entry point for the bedrock-tracker application.
This module handles top-level setup and the last-resort error report.
"""

import logging
import os
import sys

from rich.console import Console

from bedrock_tracker.cli.app import app
from bedrock_tracker.cli.formatters import format_error_with_suggestions


def main() -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    # Typer handles usage errors, Exit and Ctrl+C itself and the commands
    # report application errors; only unexpected exceptions get this far.
    try:
        app()
    except Exception as e:
        console = Console()
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        logging.getLogger("bedrock_tracker").debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
