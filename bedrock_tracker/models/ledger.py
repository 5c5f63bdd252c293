"""
Pydantic models for the persistent version ledger.

The ledger document has two sections, ``release`` and ``preview``, each
mapping a normalized version string to the Windows and Linux download links
recorded for it.
"""

from enum import Enum
from typing import Any

from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Channel(str, Enum):
    """A release track. The value is the ledger section it is recorded in."""

    REGULAR = "release"
    PREVIEW = "preview"

    @property
    def label(self) -> str:
        """Human-readable channel name used in log output."""
        return "Preview" if self is Channel.PREVIEW else "Regular"


class PlatformLink(BaseModel):
    """A single download URL for one platform."""

    model_config = ConfigDict(extra="ignore")

    url: str


class VersionRecord(BaseModel):
    """The download links for both platforms of a single version."""

    model_config = ConfigDict(extra="ignore")

    windows: PlatformLink
    linux: PlatformLink

    @classmethod
    def from_urls(cls, windows_url: str, linux_url: str) -> "VersionRecord":
        return cls(
            windows=PlatformLink(url=windows_url), linux=PlatformLink(url=linux_url)
        )


def version_key(version: str) -> tuple[Version, str] | None:
    """Sort key for a ledger version; None if the key is not a valid version."""
    try:
        return Version(version), version
    except InvalidVersion:
        return None


class Ledger(BaseModel):
    """Root document holding every known version, partitioned by channel."""

    model_config = ConfigDict(extra="ignore")

    release: dict[str, VersionRecord] = Field(default_factory=dict)
    preview: dict[str, VersionRecord] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Ledger":
        return cls()

    @classmethod
    def from_document(
        cls, document: dict[str, Any]
    ) -> tuple["Ledger", list[tuple[str, str, str]]]:
        """
        Builds a ledger from a decoded JSON document, one record at a time.

        Records that fail validation are left out instead of failing the whole
        document, so a single damaged entry cannot cost the rest of the history.

        Returns:
            The ledger and a list of ``(section, version, reason)`` for every
            record or section that was dropped.
        """
        ledger = cls.empty()
        dropped: list[tuple[str, str, str]] = []
        for channel in Channel:
            entries = document.get(channel.value)
            if entries is None:
                continue
            if not isinstance(entries, dict):
                dropped.append((channel.value, "*", "section is not an object"))
                continue

            section = ledger.section(channel)
            for version, entry in entries.items():
                try:
                    section[version] = VersionRecord.model_validate(entry)
                except ValidationError as e:
                    reason = "; ".join(
                        f"{'.'.join(map(str, err['loc'])) or 'record'}: {err['msg']}"
                        for err in e.errors()
                    )
                    dropped.append((channel.value, version, reason))
        return ledger, dropped

    def to_json(self) -> str:
        """Renders the ledger in its persisted, 2-space indented form."""
        return self.model_dump_json(indent=2)

    def section(self, channel: Channel) -> dict[str, VersionRecord]:
        """Returns the live mapping for a channel's section."""
        return self.preview if channel is Channel.PREVIEW else self.release

    def sorted_versions(self, channel: Channel) -> list[str]:
        """
        Returns a channel's version keys newest first. Keys that are not valid
        versions are listed last, in their stored order.
        """
        section = self.section(channel)
        valid = sorted(
            (key for v in section if (key := version_key(v)) is not None),
            reverse=True,
        )
        invalid = [v for v in section if version_key(v) is None]
        return [v for _, v in valid] + invalid

    def latest(self, channel: Channel) -> str | None:
        """Returns the highest valid version recorded for a channel, if any."""
        ranked = [
            key for v in self.section(channel) if (key := version_key(v)) is not None
        ]
        if not ranked:
            return None
        return max(ranked)[1]
