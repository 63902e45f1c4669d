"""Slack notifications for deployment lifecycle events."""

from slackistrano.dispatcher import DeliveryResult, Notifier
from slackistrano.hooks import DeployEnv, HostEnv, notify, register, send_test_messages
from slackistrano.messaging import Default, MessagingProvider, Null, SlackAttachments

__version__ = "0.1.0"

__all__ = [
    "Default",
    "DeliveryResult",
    "DeployEnv",
    "HostEnv",
    "MessagingProvider",
    "Notifier",
    "Null",
    "SlackAttachments",
    "notify",
    "register",
    "send_test_messages",
]
