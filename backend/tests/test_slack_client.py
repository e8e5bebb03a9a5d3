# backend/tests/test_slack_client.py

import httpx
import pytest

from refund_form.slack.client import (
    SlackAPIError,
    SlackClient,
    SlackClientError,
    SlackConnectionError,
    SlackHTTPError,
)
from refund_form.slack.config import SlackSettings, get_slack_settings
from refund_form.utils.config import EnvVarMissingError


def _client() -> SlackClient:
    return SlackClient(
        SlackSettings(
            bot_token="xoxb-test",
            api_base_url="https://slack.test/api",
            timeout_seconds=3,
        )
    )


def test_post_message_success(monkeypatch):
    captured = {}

    def fake_post(url, *, headers, json, timeout):
        captured.update(url=url, headers=headers, json=json, timeout=timeout)
        return httpx.Response(status_code=200, json={"ok": True, "ts": "1700000000.000100"})

    monkeypatch.setattr(httpx, "post", fake_post)

    result = _client().post_message({"channel": "C1", "text": "hi", "blocks": []})

    assert result["ok"] is True
    assert captured["url"] == "https://slack.test/api/chat.postMessage"
    assert captured["headers"]["Authorization"] == "Bearer xoxb-test"
    assert captured["json"]["channel"] == "C1"
    assert captured["timeout"] == 3


def test_post_message_ok_false_raises_api_error(monkeypatch):
    def fake_post(*args, **kwargs):
        return httpx.Response(status_code=200, json={"ok": False, "error": "channel_not_found"})

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(SlackAPIError) as exc_info:
        _client().post_message({"channel": "C1"})

    assert exc_info.value.error == "channel_not_found"


def test_post_message_http_error(monkeypatch):
    def fake_post(*args, **kwargs):
        return httpx.Response(status_code=503, content=b"unavailable")

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(SlackHTTPError) as exc_info:
        _client().post_message({"channel": "C1"})

    assert exc_info.value.status_code == 503
    assert exc_info.value.body == "unavailable"


def test_post_message_network_error(monkeypatch):
    def fake_post(*args, **kwargs):
        raise httpx.RequestError("network error", request=None)

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(SlackConnectionError):
        _client().post_message({"channel": "C1"})


def test_all_client_errors_share_base_class():
    for exc_type in (SlackAPIError, SlackHTTPError, SlackConnectionError):
        assert issubclass(exc_type, SlackClientError)


def test_get_slack_settings_reads_env(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
    monkeypatch.setenv("SLACK_API_BASE_URL", "https://example.com/api/")
    monkeypatch.setenv("SLACK_TIMEOUT_SECONDS", "not-a-number")

    settings = get_slack_settings()

    assert settings.bot_token == "xoxb-env"
    assert settings.api_base_url == "https://example.com/api"
    assert settings.timeout_seconds == 10


def test_get_slack_settings_missing_token(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "")

    with pytest.raises(EnvVarMissingError):
        get_slack_settings()
