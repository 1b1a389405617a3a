import ssl
from typing import Any, Dict, Optional, Type

import httpx
from loguru import logger

from trmnl_nfl.config.settings import settings


class ClientError(Exception):
    """Base exception for HTTP client errors."""

    pass


class BaseHttpClient:
    """Base class for the synchronous HTTP collaborators (ESPN, TRMNL).

    Owns its httpx.Client unless one is injected; use it as a context manager
    so the connection is closed on every exit path.
    """

    name: str = "http"
    error_class: Type[ClientError] = ClientError

    def __init__(self, client: Optional[httpx.Client] = None):
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=settings.http_timeout,
            # Verify certificates against the system trust store
            verify=ssl.create_default_context(),
            headers={"User-Agent": settings.user_agent},
        )

    def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes a single HTTP request. Transport failures are wrapped in error_class."""
        shown = self.display_url(url)
        logger.debug(f"{self.name}: {method} {shown}")
        try:
            response = self.client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json_data,
                **kwargs,
            )
        except httpx.RequestError as e:
            # Network errors, TLS failures, timeouts etc.
            logger.error(f"{self.name}: request to {shown} failed: {e!r}")
            raise self.error_class(f"Request to {shown} failed: {e}") from e

        logger.debug(f"{self.name}: {response.status_code} for {shown}")
        return response

    def display_url(self, url: str) -> str:
        """The form of url that may appear in logs and error messages."""
        return url

    def close(self) -> None:
        """Closes the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self.client.close()
            logger.debug(f"Closed HTTP client for {self.name}")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
