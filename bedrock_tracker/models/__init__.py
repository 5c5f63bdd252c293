"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application, such as configuration and the version ledger.
"""

from .config import TrackerConfig
from .ledger import Channel, Ledger, PlatformLink, VersionRecord

__all__ = ["Channel", "Ledger", "PlatformLink", "TrackerConfig", "VersionRecord"]
