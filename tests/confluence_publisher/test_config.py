"""Tests for publisher configuration loading and merging."""

from pathlib import Path

import pytest

from confluence_publisher.config import (
    PublisherConfig,
    load_config,
    merge_cli_overrides,
    require_url,
)
from confluence_publisher.exceptions import ConfigurationError


def _write_config(root: Path, text: str) -> None:
    config_dir = root / ".confluence"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(text)


def test_default_config() -> None:
    """Test default configuration values."""
    config = PublisherConfig()

    assert config.url is None
    assert config.username is None
    assert config.password is None
    assert config.timeout_seconds == 30.0
    assert config.max_retries == 3
    assert config.verify_ssl is True


def test_load_config_no_file(tmp_path: Path) -> None:
    """Test loading config when no file exists."""
    config = load_config(tmp_path)

    assert config.url is None
    assert config.max_retries == 3


def test_load_config_from_file(tmp_path: Path) -> None:
    """Test loading values from the confluence section."""
    _write_config(
        tmp_path,
        "confluence:\n"
        "  url: https://wiki.example.com\n"
        "  username: bot\n"
        "  password: s3cret\n"
        "  max_retries: 5\n",
    )

    config = load_config(tmp_path)

    assert config.url == "https://wiki.example.com"
    assert config.username == "bot"
    assert config.password is not None
    assert config.password.get_secret_value() == "s3cret"
    assert config.max_retries == 5


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test CONFLUENCE_* variables take precedence over the file."""
    _write_config(tmp_path, "confluence:\n  url: https://file.example.com\n  username: file-user\n")
    monkeypatch.setenv("CONFLUENCE_URL", "https://env.example.com")

    config = load_config(tmp_path)

    assert config.url == "https://env.example.com"
    assert config.username == "file-user"


def test_load_config_without_section(tmp_path: Path) -> None:
    """Test a file with no confluence section yields defaults."""
    _write_config(tmp_path, "other:\n  key: value\n")

    config = load_config(tmp_path)

    assert config.url is None


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Test invalid YAML is reported as a configuration error."""
    _write_config(tmp_path, "confluence: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(tmp_path)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    """Test values failing validation are reported."""
    _write_config(tmp_path, "confluence:\n  max_retries: many\n")

    with pytest.raises(ConfigurationError, match="Invalid confluence config"):
        load_config(tmp_path)


def test_merge_cli_overrides() -> None:
    """Test CLI overrides return an updated copy."""
    config = PublisherConfig(url="https://a.example.com", username="a")

    updated = merge_cli_overrides(config, url="https://b.example.com", password="pw")

    assert updated.url == "https://b.example.com"
    assert updated.username == "a"
    assert updated.password is not None
    assert updated.password.get_secret_value() == "pw"
    assert config.url == "https://a.example.com"
    assert config.password is None


def test_require_url() -> None:
    """Test a missing URL raises with a hint."""
    with pytest.raises(ConfigurationError, match="CONFLUENCE_URL"):
        require_url(PublisherConfig())

    assert require_url(PublisherConfig(url="https://wiki")) == "https://wiki"


def test_api_url() -> None:
    """Test the REST root is derived from the base URL."""
    assert PublisherConfig(url="https://wiki.example.com/").api_url == (
        "https://wiki.example.com/rest/api"
    )
