from __future__ import annotations

import logging

import httpx

from birthday_notifier.exceptions import TransportError
from birthday_notifier.models import NotifyTarget

LOGGER = logging.getLogger(__name__)


class WebhookNotifier:
    """Posts messages to an incoming-webhook URL as ``{"text", "channel"}`` JSON."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def send(self, message: str, target: NotifyTarget) -> None:
        payload = {
            "text": message,
            "channel": target.channel_id,
        }

        try:
            response = self._client.post(target.webhook_url, json=payload, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Webhook for channel {target.channel_id} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to post to webhook for channel {target.channel_id}: {exc}") from exc

        LOGGER.info("Posted message to channel %s", target.channel_id)
