"""
Additive merging of newly discovered versions into the ledger.
"""

import logging
from enum import Enum

from bedrock_tracker.models.ledger import Channel, Ledger, VersionRecord

log = logging.getLogger(__name__)


class MergeOutcome(str, Enum):
    ADDED = "added"
    ALREADY_KNOWN = "already_known"


def merge_version(
    ledger: Ledger,
    channel: Channel,
    version: str,
    windows_url: str,
    linux_url: str,
) -> MergeOutcome:
    """
    Records a version in the channel's section of the ledger if it is new.

    Existing records are never touched, even when the upstream URLs for a
    known version have changed.

    Args:
        ledger: The ledger to update in place.
        channel: Which section to update.
        version: The normalized version key.
        windows_url: Download link for the Windows build.
        linux_url: Download link for the Linux build.

    Returns:
        ``MergeOutcome.ADDED`` if a record was inserted, otherwise
        ``MergeOutcome.ALREADY_KNOWN``.
    """
    section = ledger.section(channel)

    if version in section:
        log.info(
            f"[dim]{channel.label} version v{version} is already up to date.[/dim]"
        )
        return MergeOutcome.ALREADY_KNOWN

    log.info(
        f"[green]Adding new {channel.label} version v{version} to database.[/green]"
    )
    section[version] = VersionRecord.from_urls(windows_url, linux_url)
    return MergeOutcome.ADDED
