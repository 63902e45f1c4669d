"""Messaging provider abstraction layer."""

from slackistrano.messaging.attachments import SlackAttachments
from slackistrano.messaging.base import Base, MessagingProvider
from slackistrano.messaging.default import Default
from slackistrano.messaging.null import Null
from slackistrano.messaging.resolver import resolve_messaging

__all__ = [
    "Base",
    "Default",
    "MessagingProvider",
    "Null",
    "SlackAttachments",
    "resolve_messaging",
]
