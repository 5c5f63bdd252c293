"""
Loads and saves the JSON ledger of known Bedrock server versions.
"""

import json
import logging
import os
from contextlib import suppress
from pathlib import Path

from rich.markup import escape

from bedrock_tracker.exceptions import LedgerWriteError
from bedrock_tracker.models.ledger import Ledger

log = logging.getLogger(__name__)


class LedgerStore:
    """Reads the ledger at the start of a run and writes it once at the end."""

    def __init__(self, ledger_path: Path):
        self.ledger_path = ledger_path

    def load(self) -> Ledger:
        """
        Loads the ledger from disk.

        An absent, unreadable, or non-JSON file is not an error: the run starts
        from an empty ledger instead, and the next successful save replaces the
        bad document. Inside a readable document, damaged records are dropped
        one by one and every other record is kept.
        """
        if not self.ledger_path.is_file():
            log.debug(f"No ledger at '{self.ledger_path}', starting empty.")
            return Ledger.empty()

        try:
            document = json.loads(self.ledger_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning(
                f"[yellow]Could not read ledger '{escape(str(self.ledger_path))}', "
                f"starting with an empty ledger: {escape(str(e))}[/yellow]"
            )
            return Ledger.empty()

        if not isinstance(document, dict):
            log.warning(
                f"[yellow]Ledger '{escape(str(self.ledger_path))}' is not a JSON "
                "object, starting with an empty ledger.[/yellow]"
            )
            return Ledger.empty()

        ledger, dropped = Ledger.from_document(document)
        for section, version, reason in dropped:
            log.warning(
                "[yellow]Dropping invalid ledger entry "
                f"{escape(f'{section}[{version}]')}: {escape(reason)}[/yellow]"
            )

        log.debug(
            f"Loaded ledger with {len(ledger.release)} release and "
            f"{len(ledger.preview)} preview versions."
        )
        return ledger

    def save(self, ledger: Ledger) -> None:
        """
        Writes the ledger to disk, replacing the previous file atomically.

        Raises:
            LedgerWriteError: If the file could not be written.
        """
        tmp_path = self.ledger_path.with_name(self.ledger_path.name + ".tmp")
        try:
            self.ledger_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(ledger.to_json())
            os.replace(tmp_path, self.ledger_path)
        except OSError as e:
            with suppress(OSError):
                tmp_path.unlink()
            raise LedgerWriteError(
                f"Failed to write ledger '{self.ledger_path}': {e}"
            ) from e
        log.debug(f"Saved ledger to '{self.ledger_path}'.")
