"""
Storage Layer.

This package handles all data persistence: the JSON version ledger and the
INI configuration file.
"""

from .config_manager import ConfigManager
from .ledger_store import LedgerStore

__all__ = ["ConfigManager", "LedgerStore"]
