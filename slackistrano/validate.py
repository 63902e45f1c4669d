"""Config validation for the ``slackistrano`` settings mapping."""

from typing import Optional
from urllib.parse import urlparse


def validate_config(config) -> Optional[str]:
    """
    Validate the per-run settings mapping.
    Returns None if valid, or an error message string if invalid.
    """
    if config is None or config is False:
        return None
    if not isinstance(config, dict):
        return "slackistrano config must be a mapping"

    if config.get("webhook") is not None:
        err = _validate_url(config.get("webhook"), "webhook")
    else:
        err = _require_fields(config, ["team", "token"])
    if err:
        return err

    return _validate_channel(config.get("channel"))


# --- Internal validators ---


def _require_fields(config: dict, fields: list[str]) -> Optional[str]:
    for field in fields:
        if not config.get(field):
            return f"Missing required field: {field}"
    return None


def _validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.netloc:
            return f"{field_name} is not a valid URL"
    except ValueError:
        return f"{field_name} is not a valid URL"
    return None


def _validate_channel(channel) -> Optional[str]:
    if channel is None or isinstance(channel, str):
        return None
    if isinstance(channel, (list, tuple)) and all(isinstance(c, str) for c in channel):
        return None
    return "channel must be a string or a list of strings"
