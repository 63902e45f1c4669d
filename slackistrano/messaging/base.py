"""Messaging provider interface and the default message table."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from slackistrano.messaging.helpers import MessageHelpers

DEFAULT_USERNAME = "Slackistrano"
DEFAULT_ICON_URL = "https://s3.amazonaws.com/slackistrano/slackistrano_192.png"

Channels = Union[str, list[Optional[str]], None]


class MessagingProvider(ABC):
    """
    Common interface for all messaging providers.
    A provider decides per event what is said, where, and how it is delivered.
    """

    @abstractmethod
    def payload_for(self, event: str) -> Optional[dict]:
        """Message payload for ``event``, or None to stay silent."""
        ...

    @abstractmethod
    def channels_for(self, event: str) -> Channels:
        ...

    @classmethod
    def from_config(cls, config: dict, env=None) -> "MessagingProvider":
        return cls(env=env, **config)

    @property
    @abstractmethod
    def via_slackbot(self) -> bool:
        ...

    @property
    def username(self) -> Optional[str]:
        return None

    @property
    def icon_url(self) -> Optional[str]:
        return None

    @property
    def icon_emoji(self) -> Optional[str]:
        return None

    @property
    def team(self) -> Optional[str]:
        return None

    @property
    def token(self) -> Optional[str]:
        return None

    @property
    def webhook(self) -> Optional[str]:
        return None


class Base(MessageHelpers, MessagingProvider):
    """
    Provider configured from the ``slackistrano`` settings mapping.

    Messages are looked up as ``payload_for_<event>`` methods; subclasses add
    or override events by defining more of them.
    """

    def __init__(self, env=None, **options):
        self.env = env
        self.options = dict(options)
        self._team = options.get("team")
        self._token = options.get("token")
        self._webhook = options.get("webhook")
        self._channel = options.get("channel")

    @classmethod
    def from_config(cls, config: dict, env=None) -> "Base":
        """
        Config shape: {
            "webhook": str,  # or "team" + "token"
            "channel": str | list[str],
            "username": str, "icon_url": str, "icon_emoji": str,
        }
        """
        return cls(env=env, **config)

    @property
    def team(self) -> Optional[str]:
        return self._team

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def webhook(self) -> Optional[str]:
        return self._webhook

    @property
    def via_slackbot(self) -> bool:
        return self._webhook is None

    @property
    def username(self) -> Optional[str]:
        return self.options.get("username", DEFAULT_USERNAME)

    @property
    def icon_url(self) -> Optional[str]:
        return self.options.get("icon_url", DEFAULT_ICON_URL)

    @property
    def icon_emoji(self) -> Optional[str]:
        return self.options.get("icon_emoji")

    def channels_for(self, event: str) -> Channels:
        return self._channel

    def payload_for(self, event: str) -> Optional[dict]:
        handler = getattr(self, f"payload_for_{event}", None)
        if not callable(handler):
            return None
        return handler()

    def payload_for_updating(self) -> dict:
        return {
            "text": f"{self.deployer} has started deploying branch {self.branch} "
                    f"of {self.application} to {self.stage()}"
        }

    def payload_for_reverting(self) -> dict:
        return {
            "text": f"{self.deployer} has started rolling back branch {self.branch} "
                    f"of {self.application} to {self.stage()}"
        }

    def payload_for_updated(self) -> dict:
        return {
            "text": f"{self.deployer} has finished deploying branch {self.branch} "
                    f"of {self.application} to {self.stage()}"
        }

    def payload_for_reverted(self) -> dict:
        return {
            "text": f"{self.deployer} has finished rolling back branch "
                    f"of {self.application} to {self.stage()}"
        }

    def payload_for_failed(self) -> dict:
        action = "deploy" if self.deploying else "rollback"
        return {
            "text": f"{self.deployer} has failed to {action} branch {self.branch} "
                    f"of {self.application} to {self.stage()}"
        }
