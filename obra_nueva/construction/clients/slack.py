# construction/clients/slack.py
"""Slack incoming-webhook transport."""

import logging

import requests

from ..exceptions import SlackError

logger = logging.getLogger(__name__)


class SlackNotifier:

    def __init__(self, config):
        self.webhook_url = config.slack_webhook_url
        self.timeout = config.timeout

    def post(self, message: dict) -> None:
        """Post a message ({text, blocks}) to the configured webhook. Raises SlackError."""
        try:
            response = requests.post(self.webhook_url, json=message, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"[Slack] ❌ Webhook unreachable: {e}")
            raise SlackError("Error al enviar a Slack", details=str(e)) from e

        logger.info(f"[Slack] 📡 Webhook responded {response.status_code}")
        if not response.ok:
            raise SlackError(
                "Error al enviar a Slack",
                details=response.text,
                status_code=response.status_code,
            )
