"""HTTP client factory for outbound Slack requests."""

import logging
from typing import Optional

import httpx

from slackistrano.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("Request: %s %s", request.method, request.url)
    logger.debug("Request headers: %s", dict(request.headers))
    logger.debug("Request body: %s", request.content.decode("utf-8", errors="replace"))


def _log_response(response: httpx.Response) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    response.read()
    logger.debug("Response: %s %s", response.status_code, response.request.url)
    logger.debug("Response headers: %s", dict(response.headers))
    logger.debug("Response body: %s", response.text)


def http_client(
    settings: Optional[Settings] = None,
    follow_redirects: bool = True,
    **kwargs,
) -> httpx.Client:
    settings = settings or default_settings
    if not settings.verify_ssl:
        logger.debug("TLS certificate verification disabled for Slack requests")

    event_hooks = kwargs.pop("event_hooks", {})
    event_hooks = {
        "request": [_log_request, *event_hooks.get("request", [])],
        "response": [_log_response, *event_hooks.get("response", [])],
    }
    return httpx.Client(
        timeout=settings.timeout,
        verify=settings.verify_ssl,
        follow_redirects=follow_redirects,
        event_hooks=event_hooks,
        **kwargs,
    )
