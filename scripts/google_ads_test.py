"""Quick check that the Google Ads credentials in .env can reach the account.

Usage:
  python scripts/google_ads_test.py
"""

from __future__ import annotations

from dotenv import load_dotenv

from adsops.connectivity import run_connectivity_test


def main() -> int:
    load_dotenv()
    run_connectivity_test()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
