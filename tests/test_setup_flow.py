"""Tests for the interactive credential setup flow with scripted prompts."""
from __future__ import annotations

from typing import List
from unittest.mock import MagicMock

import requests

from adsops.config import OAuthConfig
from adsops.oauth import TokenResponse, exchange_code
from adsops.setup_flow import run_credential_setup

ENV_KEYS = [
    "GOOGLE_ADS_CLIENT_ID=",
    "GOOGLE_ADS_CLIENT_SECRET=",
    "GOOGLE_ADS_DEVELOPER_TOKEN=",
    "GOOGLE_ADS_REFRESH_TOKEN=",
]


class ScriptedPrompt:
    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.asked: List[str] = []

    def __call__(self, text: str) -> str:
        self.asked.append(text)
        return self.answers.pop(0)


class FakeExchange:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    def __call__(self, code, client_id, client_secret, **kwargs):
        self.calls.append((code, client_id, client_secret, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.result


def _run(exchange, capsys):
    prompt = ScriptedPrompt(["my-client", "my-secret", "my-devtoken", "4/the-code"])
    ok = run_credential_setup(prompt=prompt, exchange=exchange)
    captured = capsys.readouterr()
    return ok, prompt, captured.out + captured.err


def test_prompts_are_asked_in_order(capsys):
    exchange = FakeExchange(TokenResponse(refresh_token="rt"))
    _, prompt, _ = _run(exchange, capsys)
    assert prompt.asked == [
        "Enter your Client ID",
        "Enter your Client Secret",
        "Enter your Developer Token",
        "Paste the authorization code here",
    ]


def test_success_prints_env_lines_and_no_error(capsys):
    exchange = FakeExchange(TokenResponse(refresh_token="rt-123", raw={"refresh_token": "rt-123"}))
    ok, _, out = _run(exchange, capsys)

    assert ok is True
    assert "client_id=my-client" in out
    assert "GOOGLE_ADS_CLIENT_ID=my-client" in out
    assert "GOOGLE_ADS_CLIENT_SECRET=my-secret" in out
    assert "GOOGLE_ADS_DEVELOPER_TOKEN=my-devtoken" in out
    assert "GOOGLE_ADS_REFRESH_TOKEN=rt-123" in out
    assert "GOOGLE_ADS_CUSTOMER_ID=YOUR-CUSTOMER-ID-HERE" in out
    assert "❌" not in out
    assert "Common issues" not in out

    code, client_id, client_secret, kwargs = exchange.calls[0]
    assert (code, client_id, client_secret) == ("4/the-code", "my-client", "my-secret")
    assert kwargs["redirect_uri"] == "http://localhost"


def test_error_prints_code_and_description_only(capsys):
    exchange = FakeExchange(
        TokenResponse(error="invalid_grant", error_description="Malformed auth code.")
    )
    ok, _, out = _run(exchange, capsys)

    assert ok is False
    assert "❌ Error: invalid_grant" in out
    assert "Description: Malformed auth code." in out
    assert "Common issues:" in out
    for key in ENV_KEYS:
        assert key not in out


def test_unexpected_payload(capsys):
    exchange = FakeExchange(TokenResponse(raw={"access_token": "at"}))
    ok, _, out = _run(exchange, capsys)

    assert ok is False
    assert "❌ Unexpected response: {'access_token': 'at'}" in out
    for key in ENV_KEYS:
        assert key not in out


def test_network_failure_is_reported_not_raised(capsys):
    exchange = FakeExchange(exc=requests.ConnectionError("connection refused"))
    ok, _, out = _run(exchange, capsys)

    assert ok is False
    assert "❌ Error: connection refused" in out
    assert "Success" not in out


def test_oauth_config_drives_url_and_exchange(capsys):
    cfg = OAuthConfig(
        redirect_uri="http://localhost:8080/callback",
        token_endpoint="https://example.test/token",
        timeout_seconds=5.0,
    )
    exchange = FakeExchange(TokenResponse(refresh_token="rt"))
    prompt = ScriptedPrompt(["cid", "sec", "dev", "code"])

    run_credential_setup(prompt=prompt, exchange=exchange, oauth_cfg=cfg)
    out = capsys.readouterr().out

    assert "redirect_uri=http%3A%2F%2Flocalhost%3A8080%2Fcallback" in out
    kwargs = exchange.calls[0][3]
    assert kwargs["token_endpoint"] == "https://example.test/token"
    assert kwargs["timeout"] == 5.0


def test_non_json_token_reply_aborts_without_env_lines(capsys):
    session = MagicMock()
    session.post.return_value.json.side_effect = ValueError("Expecting value: line 1 column 1")

    def exchange(*args, **kwargs):
        return exchange_code(*args, session=session, **kwargs)

    ok, _, out = _run(exchange, capsys)

    assert ok is False
    assert "❌ Error: Expecting value: line 1 column 1" in out
    assert "Success" not in out
    for key in ENV_KEYS:
        assert key not in out
