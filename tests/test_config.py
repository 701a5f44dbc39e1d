"""Tests for config.yaml loading."""

from __future__ import annotations

from adsops.config import load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.oauth.redirect_uri == "http://localhost"
    assert cfg.oauth.timeout_seconds is None
    assert cfg.sales.base_url == "http://localhost:8000"
    assert cfg.sales.role == "admin"
    assert cfg.sales.sync_role == "superadmin"
    assert cfg.sales.channel.platform == "shopify"


def test_yaml_overrides(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "oauth:\n"
        "  redirect_uri: http://localhost:8080/api/google-ads/callback\n"
        "sales:\n"
        "  base_url: http://127.0.0.1:9000\n"
        "  timeout_seconds: 2.5\n"
        "  channel:\n"
        "    name: pos\n"
        "    type: retail\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.oauth.redirect_uri == "http://localhost:8080/api/google-ads/callback"
    assert cfg.oauth.scope == "https://www.googleapis.com/auth/adwords"
    assert cfg.sales.base_url == "http://127.0.0.1:9000"
    assert cfg.sales.timeout_seconds == 2.5
    assert cfg.sales.channel.name == "pos"
    assert cfg.sales.channel.platform == "shopify"
    assert cfg.sales.channel.type == "retail"


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.sales.user_email == "test@example.com"
