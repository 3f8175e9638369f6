"""Minimal Confluence REST API client."""

import logging
from pathlib import Path
from types import TracebackType
from typing import Any

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from confluence_publisher.config import PublisherConfig
from confluence_publisher.exceptions import (
    AttachmentReadError,
    ConfluenceApiError,
    ConfluenceConnectionError,
)
from confluence_publisher.models import Content, ContentResultList

logger = logging.getLogger(__name__)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Request failed (attempt %d): %s. Retrying...",
        retry_state.attempt_number,
        exc,
    )


class ConfluenceClient:
    """Client for the Confluence content endpoints under /rest/api.

    Example:
        with ConfluenceClient(load_config()) as client:
            pages = client.get_content_by_space_key_and_title("DOC", "Home")
            parent = pages.first
    """

    def __init__(
        self,
        config: PublisherConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        auth = None
        if config.username:
            password = config.password.get_secret_value() if config.password else ""
            auth = httpx.BasicAuth(config.username, password)
        self._http = httpx.Client(
            base_url=config.api_url,
            auth=auth,
            timeout=config.timeout_seconds,
            verify=config.verify_ssl,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        self._send = retry(
            stop=stop_after_attempt(config.max_retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=_log_retry,
            reraise=True,
        )(self._http.request)

    def __enter__(self) -> "ConfluenceClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("%s %s", method, path)
        try:
            response = self._send(method, path, **kwargs)
        except httpx.TransportError as e:
            raise ConfluenceConnectionError(str(self._http.base_url), str(e)) from e

        if response.is_error:
            raise ConfluenceApiError(method, path, response.status_code, response.text)
        if not response.content.strip():
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ConfluenceApiError(
                method, path, response.status_code, f"response is not JSON: {response.text}"
            ) from e

    def get_content_by_space_key_and_title(self, space_key: str, title: str) -> ContentResultList:
        """Find content in a space by exact title."""
        data = self._request(
            "GET",
            "/content",
            params={"spaceKey": space_key, "title": title, "expand": "version"},
        )
        return ContentResultList.model_validate(data)

    def post_content(self, content: Content) -> Content:
        """Create new content (page, blog post or attachment)."""
        data = self._request("POST", "/content", json=content.to_payload())
        created = Content.model_validate(data)
        logger.info("Created %s '%s' (id=%s)", created.type.value, created.title, created.id)
        return created

    def create_attachment(
        self, parent_id: str, path: Path, comment: str = ""
    ) -> ContentResultList:
        """Upload a file to the attachment endpoint of a page.

        Raises:
            AttachmentReadError: If the file cannot be read
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise AttachmentReadError(path, e.strerror or str(e)) from e

        form = {"comment": comment} if comment else None
        result = self._request(
            "POST",
            f"/content/{parent_id}/child/attachment",
            files={"file": (path.name, data)},
            data=form,
            headers={"X-Atlassian-Token": "no-check"},
        )
        logger.info("Uploaded attachment %s to content %s", path.name, parent_id)
        return ContentResultList.model_validate(result)
