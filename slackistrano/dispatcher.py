"""Notification dispatcher for deployment lifecycle events."""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from slackistrano.channels import ChannelPayload
from slackistrano.channels.slackbot import format_slackbot
from slackistrano.channels.webhook import format_webhook
from slackistrano.config import Settings, settings as default_settings
from slackistrano.http import http_client
from slackistrano.messaging import MessagingProvider, Null, resolve_messaging
from slackistrano.validate import validate_config

logger = logging.getLogger(__name__)

PREFIX = "[slackistrano]"


@dataclass
class DeliveryResult:
    """Outcome of one channel delivery."""
    channel: Optional[str]
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    dry_run: bool = False


class Notifier:
    """
    Posts lifecycle notifications for one deployment run.

    Built once per run from the host env; ``process`` is called once per
    lifecycle event and never raises.
    """

    def __init__(
        self,
        env,
        settings: Optional[Settings] = None,
        client_factory: Optional[Callable[[Settings], httpx.Client]] = None,
    ):
        self.env = env
        self.settings = settings or default_settings
        self.client_factory = client_factory or http_client

        config = env.fetch("slackistrano", {})
        err = validate_config(config)
        if err:
            logger.warning("%s Invalid configuration: %s", PREFIX, err)
        self.messaging = self._resolve_messaging(config)

    def _resolve_messaging(self, config) -> MessagingProvider:
        if config is not None and config is not False and not isinstance(config, dict):
            return Null(env=self.env)
        try:
            return resolve_messaging(config, env=self.env)
        except Exception as e:
            logger.warning("%s Error notifying Slack!", PREFIX)
            logger.warning("%s   Error: %r", PREFIX, e)
            return Null(env=self.env)

    @property
    def dry_run(self) -> bool:
        return bool(getattr(self.env, "dry_run", False)) or self.settings.dry_run

    def process(self, event: str) -> None:
        """Build, route and deliver the notification for ``event``."""
        try:
            payload = self.messaging.payload_for(event)
            if payload is None:
                return

            payload = {
                "username": self.messaging.username,
                "icon_url": self.messaging.icon_url,
                "icon_emoji": self.messaging.icon_emoji,
                **payload,
            }
            channels = self.channels_for(event)
        except Exception as e:
            logger.warning("%s Error notifying Slack!", PREFIX)
            logger.warning("%s   Error: %r", PREFIX, e)
            logger.debug("Messaging provider failed for %s", event, exc_info=True)
            return

        for channel in channels:
            result = self.deliver({**payload, "channel": channel})
            logger.debug("Delivery for %s to %s: %s", event, channel, result)

    def channels_for(self, event: str) -> list[Optional[str]]:
        channels = self.messaging.channels_for(event)
        if channels is None:
            channels = []
        elif isinstance(channels, str):
            channels = [channels]
        else:
            channels = list(channels)

        if not self.messaging.via_slackbot and not channels:
            channels = [None]  # default webhook channel
        return channels

    def deliver(self, payload: dict) -> DeliveryResult:
        channel = payload.get("channel")
        try:
            if self.dry_run:
                self._post_dry_run(payload)
                return DeliveryResult(channel=channel, ok=True, dry_run=True)

            request = self.build_request(payload)
            with self.client_factory(self.settings) as client:
                response = client.request(
                    method=request.method,
                    url=request.url,
                    headers=request.headers,
                    content=request.body,
                )
        except Exception as e:
            logger.warning("%s Error notifying Slack!", PREFIX)
            logger.warning("%s   Error: %r", PREFIX, e)
            return DeliveryResult(channel=channel, ok=False, error=repr(e))

        return self._handle_response(channel, response)

    def build_request(self, payload: dict) -> ChannelPayload:
        if self.messaging.via_slackbot:
            return format_slackbot(self.messaging.team, self.messaging.token, payload)
        return format_webhook(self.messaging.webhook, payload)

    def _handle_response(self, channel, response: httpx.Response) -> DeliveryResult:
        try:
            if 200 <= response.status_code <= 299:
                logger.info("%s Success: Posted to Slack.", PREFIX)
                return DeliveryResult(channel=channel, ok=True, status_code=response.status_code)

            logger.warning("%s Slack API Failure!", PREFIX)
            logger.warning("%s   Status: %s", PREFIX, response.status_code)
            logger.warning("%s   Body: %s", PREFIX, response.text)
            return DeliveryResult(
                channel=channel,
                ok=False,
                status_code=response.status_code,
                error=response.text,
            )
        except httpx.HTTPError as e:
            logger.warning("%s Error communicating with Slack!", PREFIX)
            logger.warning("%s   Error: %s", PREFIX, e)
            return DeliveryResult(channel=channel, ok=False, error=str(e))

    def _post_dry_run(self, payload: dict) -> None:
        logger.info("%s Slackistrano Dry Run:", PREFIX)
        if self.messaging.via_slackbot:
            logger.info("%s   Team: %s", PREFIX, self.messaging.team)
            logger.info("%s   Token: %s", PREFIX, self.messaging.token)
        else:
            logger.info("%s   Webhook: %s", PREFIX, self.messaging.webhook)
        logger.info("%s   Payload: %s", PREFIX, json.dumps(payload, default=str))
