"""Google Ads connector: account and campaign lookups for the connectivity test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from adsops.config_google_ads import GoogleAdsConfig


class GoogleAdsConnectorError(RuntimeError):
    pass


@dataclass
class AccountSummary:
    id: str
    descriptive_name: str
    currency_code: str
    time_zone: str


ACCOUNT_QUERY = """
SELECT
  customer.id,
  customer.descriptive_name,
  customer.currency_code,
  customer.time_zone
FROM customer
LIMIT 1
""".strip()

CAMPAIGN_QUERY = """
SELECT
  campaign.id,
  campaign.name
FROM campaign
WHERE campaign.status != 'REMOVED'
""".strip()


def build_client(cfg: GoogleAdsConfig):
    try:
        from google.ads.googleads.client import GoogleAdsClient
    except Exception as exc:  # pragma: no cover
        raise GoogleAdsConnectorError(
            "google-ads SDK missing. Install dependency `google-ads` and retry."
        ) from exc

    payload = {
        "developer_token": cfg.developer_token,
        "client_id": cfg.client_id,
        "client_secret": cfg.client_secret,
        "refresh_token": cfg.refresh_token,
        "use_proto_plus": True,
    }
    if cfg.login_customer_id:
        payload["login_customer_id"] = cfg.login_customer_id.replace("-", "")

    return GoogleAdsClient.load_from_dict(payload)


def _search(client, customer_id: str, query: str) -> list:
    service = client.get_service("GoogleAdsService")
    stream = service.search_stream(customer_id=customer_id, query=query)
    rows = []
    for batch in stream:
        rows.extend(getattr(batch, "results", []))
    return rows


def map_account_row(row) -> AccountSummary:
    customer = getattr(row, "customer", None)
    return AccountSummary(
        id=str(getattr(customer, "id", "") or ""),
        descriptive_name=str(getattr(customer, "descriptive_name", "") or ""),
        currency_code=str(getattr(customer, "currency_code", "") or ""),
        time_zone=str(getattr(customer, "time_zone", "") or ""),
    )


def fetch_account_summary(client, customer_id: str) -> Optional[AccountSummary]:
    """Return basic account fields, or None when the query yields no row."""
    rows = _search(client, customer_id, ACCOUNT_QUERY)
    if not rows:
        return None
    return map_account_row(rows[0])


def fetch_campaign_names(client, customer_id: str) -> List[str]:
    rows = _search(client, customer_id, CAMPAIGN_QUERY)
    return [str(getattr(getattr(r, "campaign", None), "name", "") or "") for r in rows]
