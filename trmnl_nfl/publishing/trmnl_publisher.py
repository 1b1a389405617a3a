# trmnl_nfl/publishing/trmnl_publisher.py
from typing import Optional

import httpx
from loguru import logger

from trmnl_nfl.clients.base_client import BaseHttpClient, ClientError
from trmnl_nfl.config.settings import settings
from trmnl_nfl.logging.setup import mask_value, register_secret
from trmnl_nfl.models.data_models import ResultPayload


class PublishError(ClientError):
    """Raised when the payload cannot be delivered to the TRMNL webhook."""

    pass


class TRMNLPublisher(BaseHttpClient):
    """Posts a ResultPayload to a TRMNL custom plugin webhook."""

    name = "trmnl"
    error_class = PublishError

    def __init__(
        self,
        plugin_id: str,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
    ):
        if not plugin_id:
            raise PublishError("Missing TRMNL plugin ID.")
        # The plugin ID is the webhook's write credential; keep it out of the logs
        register_secret(plugin_id)
        super().__init__(client)
        self.plugin_id = plugin_id
        self.url = f"{(base_url or settings.trmnl_base_url).rstrip('/')}/{plugin_id}"

    def display_url(self, url: str) -> str:
        return url.replace(self.plugin_id, mask_value(self.plugin_id))

    def publish(self, payload: ResultPayload) -> int:
        """Posts the payload once and returns the HTTP status code.

        Any status is returned to the caller; only transport/TLS failures raise.
        """
        body = payload.to_webhook_body()
        response = self._make_request(
            "POST",
            self.url,
            headers={"Content-Type": "application/json"},
            json_data=body,
        )
        if response.is_success:
            logger.success(f"Published to TRMNL plugin ({response.status_code})")
        else:
            logger.warning(
                f"TRMNL responded {response.status_code} {response.reason_phrase} for {self.display_url(self.url)}"
            )
        return response.status_code
