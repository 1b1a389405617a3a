# trmnl_nfl/clients/espn_client.py
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from trmnl_nfl.config.settings import settings
from .base_client import BaseHttpClient, ClientError


class FetchError(ClientError):
    """Raised when the ESPN schedule cannot be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ESPNClient(BaseHttpClient):
    """Fetches a team's season schedule from the ESPN site API."""

    name = "espn"
    error_class = FetchError

    def __init__(self, client: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        super().__init__(client)
        self.base_url = (base_url or settings.espn_base_url).rstrip("/")

    def schedule_url(self, team_abbr: str) -> str:
        return f"{self.base_url}/{team_abbr.lower()}/schedule"

    def fetch_schedule(self, team_abbr: str) -> Dict[str, Any]:
        """Returns the decoded schedule document for team_abbr.

        Raises FetchError on any non-200 response, transport failure or
        undecodable body.
        """
        url = self.schedule_url(team_abbr)
        logger.info(f"Fetching schedule for {team_abbr.upper()}")
        response = self._make_request("GET", url)

        if response.status_code != 200:
            logger.error(
                f"ESPN returned {response.status_code} {response.reason_phrase} for {url}"
            )
            raise FetchError(
                f"Error fetching data: {response.status_code} - {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            document = response.json()
        except ValueError as e:
            logger.error(f"ESPN schedule for {team_abbr.upper()} is not valid JSON: {e}")
            raise FetchError(
                f"Error decoding schedule data: {e}", status_code=response.status_code
            ) from e

        if not isinstance(document, dict):
            raise FetchError(
                "Error decoding schedule data: expected a JSON object",
                status_code=response.status_code,
            )

        logger.success(
            f"Fetched {len(document.get('events') or [])} events for {team_abbr.upper()}"
        )
        return document
