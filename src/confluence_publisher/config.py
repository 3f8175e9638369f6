"""Publisher configuration schema and loading."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from confluence_publisher.exceptions import ConfigurationError

CONFIG_DIR = ".confluence"
CONFIG_FILE = "config.yaml"


class PublisherConfig(BaseSettings):
    """Connection settings for the Confluence server.

    Precedence:
    1. CLI flags (highest)
    2. CONFLUENCE_* environment variables
    3. .confluence/config.yaml (``confluence:`` section)
    4. Defaults (lowest)
    """

    url: str | None = Field(default=None, description="Base URL, e.g. https://wiki.example.com")
    username: str | None = Field(default=None, description="User for HTTP basic auth")
    password: SecretStr | None = Field(default=None, description="Password or API token")
    timeout_seconds: float = Field(default=30.0, description="Request timeout in seconds")
    max_retries: int = Field(default=3, description="Retries on connection errors")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    model_config = SettingsConfigDict(
        env_prefix="CONFLUENCE_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables override values read from config.yaml
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def api_url(self) -> str:
        """REST API root derived from the base URL."""
        return f"{require_url(self).rstrip('/')}/rest/api"


def load_config(project_root: Path | None = None) -> PublisherConfig:
    """Load configuration from .confluence/config.yaml and the environment.

    Args:
        project_root: Directory containing .confluence/. Defaults to cwd.

    Returns:
        PublisherConfig with environment values taking precedence over the file

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_DIR / CONFIG_FILE

    file_values: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Invalid config in {config_path}: expected a mapping")
        file_values = raw_config.get("confluence") or {}

    try:
        return PublisherConfig(**file_values)
    except Exception as e:
        raise ConfigurationError(f"Invalid confluence config in {config_path}: {e}") from e


def merge_cli_overrides(
    config: PublisherConfig,
    url: str | None = None,
    username: str | None = None,
    password: str | None = None,
) -> PublisherConfig:
    """Merge CLI flag overrides into config.

    Returns:
        New PublisherConfig with overrides applied
    """
    updated = config.model_copy(deep=True)

    if url is not None:
        updated.url = url

    if username is not None:
        updated.username = username

    if password is not None:
        updated.password = SecretStr(password)

    return updated


def require_url(config: PublisherConfig) -> str:
    """Return the configured URL or fail with a hint on how to set it."""
    if not config.url:
        raise ConfigurationError(
            "No Confluence URL configured. Set CONFLUENCE_URL or add 'url' under "
            f"'confluence:' in {CONFIG_DIR}/{CONFIG_FILE}."
        )
    return config.url
