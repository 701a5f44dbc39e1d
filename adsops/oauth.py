"""OAuth2 authorization-code helpers for the Google Ads API.

Builds the consent URL the user opens in a browser, exchanges the pasted
authorization code for tokens and renders the resulting ``.env`` lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional
from urllib.parse import urlencode

import requests

AUTH_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_ENDPOINT = "https://oauth2.googleapis.com/token"
ADWORDS_SCOPE = "https://www.googleapis.com/auth/adwords"
REDIRECT_URI = "http://localhost"

CUSTOMER_ID_PLACEHOLDER = "YOUR-CUSTOMER-ID-HERE"


@dataclass
class CredentialBundle:
    client_id: str
    client_secret: str
    developer_token: str
    refresh_token: Optional[str] = None


@dataclass
class TokenResponse:
    refresh_token: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None
    raw: Any = field(default_factory=dict)

    @property
    def kind(self) -> str:
        """One of ``success``, ``error`` or ``unexpected``."""
        if self.refresh_token:
            return "success"
        if self.error:
            return "error"
        return "unexpected"


def build_authorization_url(
    client_id: str,
    redirect_uri: str = REDIRECT_URI,
    scope: str = ADWORDS_SCOPE,
    auth_endpoint: str = AUTH_ENDPOINT,
) -> str:
    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "scope": scope,
        "response_type": "code",
        "access_type": "offline",
        "prompt": "consent",
    }
    return f"{auth_endpoint}?{urlencode(params)}"


def parse_token_response(payload: Any) -> TokenResponse:
    if not isinstance(payload, dict):
        return TokenResponse(raw=payload)
    return TokenResponse(
        refresh_token=payload.get("refresh_token") or None,
        error=payload.get("error") or None,
        error_description=payload.get("error_description"),
        raw=payload,
    )


def exchange_code(
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str = REDIRECT_URI,
    token_endpoint: str = TOKEN_ENDPOINT,
    session=None,
    timeout: Optional[float] = None,
) -> TokenResponse:
    """POST the authorization code to the token endpoint.

    Google answers bad codes with HTTP 400 and an ``error`` body, so the
    status code is not raised on; the JSON body is classified instead.
    Transport errors and non-JSON bodies propagate.
    """
    http = session or requests
    response = http.post(
        token_endpoint,
        data={
            "code": code.strip(),
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=timeout,
    )
    return parse_token_response(response.json())


def format_env_block(bundle: CredentialBundle) -> List[str]:
    return [
        "# Google Ads API Configuration",
        f"GOOGLE_ADS_CLIENT_ID={bundle.client_id}",
        f"GOOGLE_ADS_CLIENT_SECRET={bundle.client_secret}",
        f"GOOGLE_ADS_DEVELOPER_TOKEN={bundle.developer_token}",
        f"GOOGLE_ADS_REFRESH_TOKEN={bundle.refresh_token}",
        "",
        "# Add your Google Ads Customer ID (from Google Ads account, no dashes):",
        f"GOOGLE_ADS_CUSTOMER_ID={CUSTOMER_ID_PLACEHOLDER}",
    ]

