"""Request types for Slack delivery modes."""

from dataclasses import dataclass


@dataclass
class ChannelPayload:
    """Represents the HTTP request for a single channel delivery."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string or plain text
