"""Deliver a payload to a Slack incoming webhook."""

import logging
from typing import Optional

import httpx

from drone_slack.channels import SlackPayload
from drone_slack.errors import DispatchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


def http_client(timeout: float = DEFAULT_TIMEOUT, **kwargs) -> httpx.Client:
    return httpx.Client(timeout=timeout, **kwargs)


def send(
    webhook_url: Optional[str],
    payload: SlackPayload,
    client: Optional[httpx.Client] = None,
) -> None:
    """
    Post ``payload`` to ``webhook_url`` once.

    Args:
        webhook_url: Slack incoming webhook URL
        payload: SlackPayload instance
        client: Optional httpx.Client; a short-lived one is used otherwise

    Raises:
        DispatchError: no URL, transport failure, or a non-2xx response
    """
    if not webhook_url:
        raise DispatchError("Webhook URL is not configured")

    try:
        if client is None:
            with http_client() as own_client:
                response = own_client.post(webhook_url, json=payload.to_dict())
        else:
            response = client.post(webhook_url, json=payload.to_dict())
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Failed to send notification: %s", e)
        raise DispatchError(f"Webhook request failed: {e}") from e

    if not response.is_success:
        logger.warning(
            "Webhook returned status %s: %s", response.status_code, response.text[:200]
        )
        raise DispatchError(
            f"Webhook returned status {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )

    logger.info("Notification sent (status %s)", response.status_code)
