"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class BedrockTrackerError(Exception):
    """Base exception for all application-specific errors."""


class FetchError(BedrockTrackerError):
    """Raised when the download-links payload could not be obtained."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class MissingDownloadLink(BedrockTrackerError):
    """Raised when a required link category is absent or empty in the payload."""

    def __init__(self, category: str):
        super().__init__(f"Missing download URL for {category}")
        self.category = category


class ExtractionError(BedrockTrackerError):
    """Raised when a download URL does not contain a bedrock-server-<version>.zip name."""

    def __init__(self, url: str):
        super().__init__(f"Unable to extract version from URL: {url}")
        self.url = url


class VersionMismatch(BedrockTrackerError):
    """
    Raised when the Windows and Linux links of one channel point at different
    versions.
    """

    def __init__(self, channel: str, windows_version: str, linux_version: str):
        super().__init__(
            f"Version mismatch in {channel} release: "
            f"Windows={windows_version}, Linux={linux_version}"
        )
        self.channel = channel
        self.windows_version = windows_version
        self.linux_version = linux_version


class InvalidVersionFormat(BedrockTrackerError):
    """Raised when a version string has fewer than two numeric segments."""

    def __init__(self, version: str):
        super().__init__(f"Invalid version format: {version}")
        self.version = version


class ConfigurationError(BedrockTrackerError):
    """Raised for issues related to configuration loading or validation."""


class LedgerWriteError(BedrockTrackerError):
    """Raised when the ledger document could not be written to disk."""
