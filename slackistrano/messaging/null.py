"""Provider used when notifications are switched off."""

from typing import Optional

from slackistrano.messaging.base import Channels, MessagingProvider


class Null(MessagingProvider):

    def __init__(self, env=None, **options):
        self.env = env

    def payload_for(self, event: str) -> Optional[dict]:
        return None

    def channels_for(self, event: str) -> Channels:
        return None

    @property
    def via_slackbot(self) -> bool:
        return False
