"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_API_URL = (
    "https://net-secondary.web.minecraft-services.net/api/v1.0/download/links"
)
DEFAULT_LEDGER_PATH = "bedrock-server-downloads.json"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30


class TrackerConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    api_url: str = DEFAULT_API_URL
    ledger_path: str = DEFAULT_LEDGER_PATH
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_TIMEOUT

    # Internal fields not loaded from INI file
    dry_run: bool = False

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Only plain HTTP(S) endpoints are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API URL must start with http:// or https://, got: {v}")
        return v

    @field_validator("ledger_path", "user_agent")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Value cannot be empty.")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Ensures a reasonable request timeout."""
        if v < 1 or v > 300:
            raise ValueError("Timeout must be between 1 and 300 seconds.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"dry_run"}
        return {key for key in cls.model_fields if key not in internal_fields}
