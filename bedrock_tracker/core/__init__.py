"""
Core update engine.

This package contains the decision logic of a run: pulling versions out of
download links, checking that both platforms agree, and merging new versions
into the ledger. `process_links` coordinates the whole pass.
"""

from .merger import MergeOutcome, merge_version
from .orchestrator import (
    ALL_REQUIRED_CATEGORIES,
    REQUIRED_LINKS,
    ChannelResult,
    RunResult,
    process_links,
)
from .version import check_consistency, extract_version, normalize_version

__all__ = [
    "ALL_REQUIRED_CATEGORIES",
    "REQUIRED_LINKS",
    "ChannelResult",
    "MergeOutcome",
    "RunResult",
    "check_consistency",
    "extract_version",
    "merge_version",
    "normalize_version",
    "process_links",
]
