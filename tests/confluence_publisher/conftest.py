"""Shared pytest fixtures for confluence-publisher tests.

Provides a configured client backed by an in-memory Confluence double.
"""

import httpx
import pytest

from confluence_publisher.client import ConfluenceClient
from confluence_publisher.config import PublisherConfig
from fakes import FakeConfluence

BASE_URL = "https://wiki.example.com"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CONFLUENCE_* variables from the developer's shell out of tests."""
    for name in ("URL", "USERNAME", "PASSWORD", "TIMEOUT_SECONDS", "MAX_RETRIES", "VERIFY_SSL"):
        monkeypatch.delenv(f"CONFLUENCE_{name}", raising=False)


@pytest.fixture
def config() -> PublisherConfig:
    """Configuration pointing at the fake server without retries."""
    return PublisherConfig(url=BASE_URL, username="bot", password="secret", max_retries=0)


@pytest.fixture
def fake_confluence() -> FakeConfluence:
    """Fake server with a single 'Home' page in space DOC."""
    fake = FakeConfluence()
    fake.add_page("DOC", "Home")
    return fake


@pytest.fixture
def client(config: PublisherConfig, fake_confluence: FakeConfluence) -> ConfluenceClient:
    """Client wired to the fake server.

    Yields:
        ConfluenceClient using an httpx.MockTransport
    """
    client = ConfluenceClient(config, transport=httpx.MockTransport(fake_confluence.handler))
    yield client
    client.close()
