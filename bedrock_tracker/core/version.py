"""
Version extraction, normalization, and cross-platform consistency checks for
Bedrock server download links.
"""

import logging
import re

from packaging.version import InvalidVersion, Version

from bedrock_tracker.exceptions import (
    ExtractionError,
    InvalidVersionFormat,
    VersionMismatch,
)

log = logging.getLogger(__name__)

# Pre-compiled regex for performance
_SERVER_ARCHIVE_REGEX = re.compile(
    r"bedrock-server-(?P<version>[0-9]+(?:\.[0-9]+)+)\.zip"
)


def extract_version(url: str) -> str:
    """
    Extracts the raw version from the first ``bedrock-server-<version>.zip``
    filename found in a download link.

    The result is returned exactly as it appears in the link, e.g.
    ``1.21.50.3``. Use :func:`normalize_version` to get a ledger key.

    Raises:
        ExtractionError: If the link contains no such filename.
    """
    match = _SERVER_ARCHIVE_REGEX.search(url)
    if not match:
        raise ExtractionError(url)
    return match.group("version")


def normalize_version(raw_version: str) -> str:
    """
    Reduces a version to its canonical two or three segment form.

    ``1.21.50.3`` becomes ``1.21.50``, ``1.021`` becomes ``1.21``. Segments past
    the third are dropped, as are pre-release and build suffixes.

    Raises:
        InvalidVersionFormat: If the string is not a valid version or has fewer
        than two release segments.
    """
    try:
        segments = Version(raw_version).release
    except InvalidVersion as e:
        raise InvalidVersionFormat(raw_version) from e

    if len(segments) < 2:
        raise InvalidVersionFormat(raw_version)
    if len(segments) >= 3:
        return f"{segments[0]}.{segments[1]}.{segments[2]}"
    return f"{segments[0]}.{segments[1]}"


def check_consistency(channel: str, windows_version: str, linux_version: str) -> None:
    """
    Fails if the raw versions extracted for Windows and Linux differ.

    The comparison is on the raw strings, so ``1.2.3.0`` and ``1.2.3`` are a
    mismatch even though both normalize to ``1.2.3``.
    """
    if windows_version != linux_version:
        log.debug(
            f"Raw version mismatch for {channel}: {windows_version!r} != "
            f"{linux_version!r}"
        )
        raise VersionMismatch(channel, windows_version, linux_version)
