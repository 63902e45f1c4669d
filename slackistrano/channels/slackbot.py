"""Slackbot (team + token) channel adapter."""

from urllib.parse import quote

from slackistrano.channels import ChannelPayload

SLACKBOT_URL = "https://{team}.slack.com/services/hooks/slackbot?token={token}&channel={channel}"

# Characters left alone when escaping the assembled URL
_URL_SAFE = "-_.!~*'();/?:@&=+$,[]"


def slackbot_text(payload: dict) -> str:
    """Newline-joined attachment texts, or the top-level text."""
    attachments = payload.get("attachments")
    parts = attachments if attachments is not None else [payload]
    return "\n".join(str(part.get("text") or "") for part in parts)


def format_slackbot(team: str, token: str, payload: dict) -> ChannelPayload:
    """
    Format a notification for the slackbot endpoint.

    The channel travels in the query string, so the body is the bare
    message text.
    """
    channel = payload.get("channel")
    url = SLACKBOT_URL.format(
        team=team if team is not None else "",
        token=token if token is not None else "",
        channel=channel if channel is not None else "",
    )

    return ChannelPayload(
        method="POST",
        url=quote(url, safe=_URL_SAFE),
        headers={"Content-Type": "text/plain"},
        body=slackbot_text(payload),
    )
