"""Configuration loader/validator for the Google Ads connectivity test (BYO creds)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

# Order matters: missing names are reported in this order.
REQUIRED_ENV_VARS = [
    "GOOGLE_ADS_CLIENT_ID",
    "GOOGLE_ADS_CLIENT_SECRET",
    "GOOGLE_ADS_DEVELOPER_TOKEN",
    "GOOGLE_ADS_REFRESH_TOKEN",
    "GOOGLE_ADS_CUSTOMER_ID",
]

_YAML_KEYS = {
    "GOOGLE_ADS_CLIENT_ID": "client_id",
    "GOOGLE_ADS_CLIENT_SECRET": "client_secret",
    "GOOGLE_ADS_DEVELOPER_TOKEN": "developer_token",
    "GOOGLE_ADS_REFRESH_TOKEN": "refresh_token",
    "GOOGLE_ADS_CUSTOMER_ID": "customer_id",
    "GOOGLE_ADS_LOGIN_CUSTOMER_ID": "login_customer_id",
}


class GoogleAdsConfigError(ValueError):
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__("Missing environment variables: " + ", ".join(self.missing))


class GoogleAdsConfigFileError(ValueError):
    """google-ads.yaml exists but does not parse to a YAML mapping."""


@dataclass
class GoogleAdsConfig:
    developer_token: str
    client_id: str
    client_secret: str
    refresh_token: str
    customer_id: str
    login_customer_id: Optional[str] = None

    @property
    def normalized_customer_id(self) -> str:
        """Customer ID with dashes and whitespace removed (123-456-7890 -> 1234567890)."""
        return "".join(ch for ch in self.customer_id if ch != "-" and not ch.isspace())


def _clean(v) -> str:
    return str(v or "").strip()


def _read_yaml(yaml_path: Optional[str], environ: Mapping[str, str]) -> dict:
    cfg_path = yaml_path or environ.get("GOOGLE_ADS_YAML") or "google-ads.yaml"
    p = Path(cfg_path)
    if not p.exists():
        return {}
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise GoogleAdsConfigFileError(f"Invalid YAML in {p}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise GoogleAdsConfigFileError(
            f"{p} must contain key: value pairs, got {type(raw).__name__}"
        )
    return raw


def load_google_ads_config(
    environ: Optional[Mapping[str, str]] = None, yaml_path: Optional[str] = None
) -> GoogleAdsConfig:
    """Build the config once from *environ* (defaults to ``os.environ``).

    Each value comes from its environment variable first, then from the
    optional google-ads.yaml style file:
    1) explicit *yaml_path*
    2) env `GOOGLE_ADS_YAML`
    3) default `google-ads.yaml` in cwd
    """
    env = os.environ if environ is None else environ
    raw = _read_yaml(yaml_path, env)

    values = {
        name: _clean(env.get(name)) or _clean(raw.get(key))
        for name, key in _YAML_KEYS.items()
    }

    missing = [name for name in REQUIRED_ENV_VARS if not values[name]]
    if missing:
        raise GoogleAdsConfigError(missing)

    return GoogleAdsConfig(
        developer_token=values["GOOGLE_ADS_DEVELOPER_TOKEN"],
        client_id=values["GOOGLE_ADS_CLIENT_ID"],
        client_secret=values["GOOGLE_ADS_CLIENT_SECRET"],
        refresh_token=values["GOOGLE_ADS_REFRESH_TOKEN"],
        customer_id=values["GOOGLE_ADS_CUSTOMER_ID"],
        login_customer_id=values["GOOGLE_ADS_LOGIN_CUSTOMER_ID"] or None,
    )
