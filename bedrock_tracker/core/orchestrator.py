"""
Drives extraction, consistency checking, normalization, and merging for every
release channel in a single linear pass.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from bedrock_tracker.exceptions import MissingDownloadLink
from bedrock_tracker.models.ledger import Channel, Ledger

from .merger import MergeOutcome, merge_version
from .version import check_consistency, extract_version, normalize_version

log = logging.getLogger(__name__)

# Link categories (downloadType values) for each channel: (windows, linux)
REQUIRED_LINKS: dict[Channel, tuple[str, str]] = {
    Channel.REGULAR: ("serverBedrockWindows", "serverBedrockLinux"),
    Channel.PREVIEW: ("serverBedrockPreviewWindows", "serverBedrockPreviewLinux"),
}

ALL_REQUIRED_CATEGORIES: tuple[str, ...] = tuple(
    category for pair in REQUIRED_LINKS.values() for category in pair
)


@dataclass(frozen=True)
class ChannelResult:
    """What happened to one channel during a run."""

    channel: Channel
    version: str
    raw_version: str
    outcome: MergeOutcome
    windows_url: str
    linux_url: str


@dataclass
class RunResult:
    """The updated ledger plus a per-channel report, ready to be persisted."""

    ledger: Ledger
    channels: list[ChannelResult] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return any(r.outcome is MergeOutcome.ADDED for r in self.channels)

    @property
    def added(self) -> list[ChannelResult]:
        return [r for r in self.channels if r.outcome is MergeOutcome.ADDED]


def validate_links(
    raw_links: Mapping[str, str],
    categories: Iterable[str] = ALL_REQUIRED_CATEGORIES,
) -> None:
    """
    Ensures every required link category is present and non-empty.

    Raises:
        MissingDownloadLink: Naming the first missing category.
    """
    for category in categories:
        if not raw_links.get(category):
            raise MissingDownloadLink(category)


def process_channel(
    ledger: Ledger, channel: Channel, windows_url: str, linux_url: str
) -> ChannelResult:
    """Extracts, checks, normalizes, and merges the links of one channel."""
    windows_version = extract_version(windows_url)
    linux_version = extract_version(linux_url)
    check_consistency(channel.label.lower(), windows_version, linux_version)

    version = normalize_version(windows_version)
    outcome = merge_version(ledger, channel, version, windows_url, linux_url)
    return ChannelResult(
        channel=channel,
        version=version,
        raw_version=windows_version,
        outcome=outcome,
        windows_url=windows_url,
        linux_url=linux_url,
    )


def process_links(
    raw_links: Mapping[str, str],
    ledger: Ledger,
    required_links: Mapping[Channel, tuple[str, str]] = REQUIRED_LINKS,
) -> RunResult:
    """
    Runs a full update pass over all channels.

    The given ledger is left untouched; all changes are made to a copy that is
    returned in the result. Any failure aborts the whole pass, so a caller that
    persists only on success never writes partial progress.

    Args:
        raw_links: Mapping of link category (downloadType) to download URL.
        ledger: The ledger as loaded at the start of the run.
        required_links: The (windows, linux) link categories of each channel.

    Returns:
        A RunResult holding the updated ledger and one entry per channel.
    """
    log.info("Processing Minecraft Bedrock Server versions...")
    validate_links(
        raw_links, [category for pair in required_links.values() for category in pair]
    )

    updated = ledger.model_copy(deep=True)
    result = RunResult(ledger=updated)
    for channel, (windows_key, linux_key) in required_links.items():
        result.channels.append(
            process_channel(
                updated, channel, raw_links[windows_key], raw_links[linux_key]
            )
        )

    return result
