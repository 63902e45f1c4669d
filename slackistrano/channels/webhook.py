"""Incoming webhook channel adapter."""

import json

from slackistrano.channels import ChannelPayload


def webhook_text(payload: dict):
    """
    Value sent as the webhook's ``text`` field.

    Without attachments this is the payload's own text. With attachments
    the whole payload mapping is passed through unchanged.
    """
    if payload.get("attachments") is None:
        return "\n".join(str(p.get("text") or "") for p in [payload])
    return payload


def format_webhook(webhook_url: str, payload: dict) -> ChannelPayload:
    """
    Format a notification for a Slack incoming webhook.

    Config expects:
        - webhook: full incoming webhook URL
    """
    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps({"text": webhook_text(payload)}),
    )
