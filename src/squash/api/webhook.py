"""Discord-style webhook sender."""
from __future__ import annotations
import json
import logging

import httpx

from squash.common.exceptions import WebhookEndpointError

LOGGER = logging.getLogger("squash.api.webhook")


class WebhookClient:
    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, follow_redirects=True, transport=self.transport)

    def send_message(self, message: str, webhook_url: str) -> str:
        """
        Post a message to a webhook.

        Args:
            message: Text placed in the `content` field.
            webhook_url: Full webhook URL.

        Returns:
            Raw response body.
        """
        body = json.dumps({"content": message}, ensure_ascii=False).encode("utf-8")
        LOGGER.debug("POST %s", webhook_url)
        try:
            with self._client() as client:
                r = client.post(
                    webhook_url,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            LOGGER.warning("Webhook delivery failed: %s", e)
            raise WebhookEndpointError(str(e)) from e
        return r.text

