import json

from slackistrano.channels.slackbot import format_slackbot, slackbot_text
from slackistrano.channels.webhook import format_webhook, webhook_text


def test_slackbot_text_joins_attachments():
    payload = {"text": "ignored", "attachments": [{"text": "A"}, {"text": "B"}]}
    assert slackbot_text(payload) == "A\nB"


def test_slackbot_text_falls_back_to_text():
    assert slackbot_text({"text": "hello"}) == "hello"
    assert slackbot_text({"attachments": None, "text": "hello"}) == "hello"


def test_slackbot_text_empty_attachments_sends_empty_body():
    assert slackbot_text({"attachments": [], "text": "hello"}) == ""


def test_slackbot_url_is_escaped():
    request = format_slackbot("acme", "T1", {"text": "x", "channel": "#dev ops"})
    assert request.url == "https://acme.slack.com/services/hooks/slackbot?token=T1&channel=%23dev%20ops"
    assert request.method == "POST"
    assert request.headers == {"Content-Type": "text/plain"}


def test_slackbot_without_channel():
    request = format_slackbot("acme", "T1", {"text": "x", "channel": None})
    assert request.url.endswith("&channel=")


def test_webhook_text_without_attachments():
    assert webhook_text({"text": "Deployed v1.2", "username": "bot"}) == "Deployed v1.2"
    assert webhook_text({"username": "bot"}) == ""


def test_webhook_text_with_attachments_is_whole_payload():
    payload = {"attachments": [{"text": "A"}], "username": "bot"}
    assert webhook_text(payload) is payload


def test_format_webhook():
    request = format_webhook("https://hooks.example/abc", {"text": "Deployed v1.2", "channel": "#eng"})
    assert request.url == "https://hooks.example/abc"
    assert request.headers == {"Content-Type": "application/json"}
    assert json.loads(request.body) == {"text": "Deployed v1.2"}
