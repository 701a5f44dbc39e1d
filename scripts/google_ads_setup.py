"""Helper to obtain a Google Ads refresh token (manual copy-paste OAuth flow).

Usage:
  python scripts/google_ads_setup.py
"""

from __future__ import annotations

from adsops.config import load_config
from adsops.setup_flow import run_credential_setup


def main() -> int:
    run_credential_setup(oauth_cfg=load_config().oauth)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
