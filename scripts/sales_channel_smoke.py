"""Smoke test against a locally running sales service (sales.base_url in config.yaml).

Usage:
  python scripts/sales_channel_smoke.py
"""

from __future__ import annotations

from adsops.config import load_config
from adsops.smoke_test import run_configured_smoke_test


def main() -> int:
    run_configured_smoke_test(load_config().sales)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
