"""Load and validate config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class OAuthConfig:
    auth_endpoint: str = "https://accounts.google.com/o/oauth2/v2/auth"
    token_endpoint: str = "https://oauth2.googleapis.com/token"
    scope: str = "https://www.googleapis.com/auth/adwords"
    redirect_uri: str = "http://localhost"
    timeout_seconds: Optional[float] = None  # None = wait indefinitely


@dataclass
class ChannelConfig:
    """Sample channel sent by the smoke test."""

    name: str = "online_store"
    platform: str = "shopify"
    type: str = "online_store"


@dataclass
class SalesConfig:
    base_url: str = "http://localhost:8000"
    user_email: str = "test@example.com"
    role: str = "admin"
    sync_role: str = "superadmin"
    sync_platform: str = "shopify"
    timeout_seconds: Optional[float] = None
    channel: ChannelConfig = field(default_factory=ChannelConfig)


@dataclass
class AppConfig:
    oauth: OAuthConfig = field(default_factory=OAuthConfig)
    sales: SalesConfig = field(default_factory=SalesConfig)


def load_config(path: str | Path = "config.yaml") -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    p = Path(path)
    raw: dict = {}
    if p.exists():
        with open(p, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    sales_raw = dict(raw.get("sales", {}) or {})
    channel = ChannelConfig(**(sales_raw.pop("channel", {}) or {}))

    return AppConfig(
        oauth=OAuthConfig(**(raw.get("oauth", {}) or {})),
        sales=SalesConfig(channel=channel, **sales_raw),
    )
