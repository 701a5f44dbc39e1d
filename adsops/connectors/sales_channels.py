"""Sales channel service client (local dev API, header pseudo-auth)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import requests

CHANNELS_PATH = "/api/sales/channels"
SYNC_PATH = "/api/sales/sync/{platform}"


@dataclass
class ChannelDescriptor:
    name: str
    platform: str
    type: str

    def to_payload(self) -> Dict[str, str]:
        return asdict(self)


class SalesChannelClient:
    """Thin wrapper over the sales service REST endpoints.

    Responses are decoded and returned as-is; HTTP status codes are not checked.
    """

    def __init__(
        self,
        base_url: str,
        user_email: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_email = user_email
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "SalesChannelClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self, role: str) -> Dict[str, str]:
        return {"X-User-Email": self.user_email, "X-User-Role": role}

    def create_channel(self, channel: ChannelDescriptor, role: str = "admin") -> Any:
        resp = self.session.post(
            self.base_url + CHANNELS_PATH,
            json=channel.to_payload(),
            headers=self._headers(role),
            timeout=self.timeout,
        )
        return resp.json()

    def list_channels(self, role: str = "admin") -> Any:
        resp = self.session.get(
            self.base_url + CHANNELS_PATH,
            headers=self._headers(role),
            timeout=self.timeout,
        )
        return resp.json()

    def sync_platform(self, platform: str, role: str = "superadmin") -> Any:
        resp = self.session.post(
            self.base_url + SYNC_PATH.format(platform=platform),
            headers=self._headers(role),
            timeout=self.timeout,
        )
        return resp.json()
