"""CLI entry point for adsops."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from adsops import __version__
from adsops.config import load_config
from adsops.connectivity import run_connectivity_test
from adsops.setup_flow import run_credential_setup
from adsops.smoke_test import run_configured_smoke_test


@click.group()
@click.version_option(version=__version__, prog_name="adsops")
def cli():
    """Google Ads credential tooling and sales-channel smoke tests."""
    pass


@cli.group("google-ads")
def google_ads_group():
    """Google Ads credential commands."""
    pass


@google_ads_group.command("setup")
@click.option("--config", "config_path", default="config.yaml", help="Config file path")
def google_ads_setup(config_path: str):
    """Obtain a refresh token and print the .env lines to copy."""
    cfg = load_config(config_path)
    run_credential_setup(oauth_cfg=cfg.oauth)


@google_ads_group.command("test")
@click.option(
    "--yaml", "yaml_path", default=None, help="Optional google-ads.yaml path"
)
@click.option(
    "--env-file", "env_file", default=".env", show_default=True, help="dotenv file to load"
)
def google_ads_test(yaml_path: str | None, env_file: str):
    """Verify the configured credentials can query the account."""
    load_dotenv(env_file)
    run_connectivity_test(yaml_path=yaml_path)


@cli.group("sales")
def sales_group():
    """Sales channel service commands."""
    pass


@sales_group.command("smoke-test")
@click.option("--config", "config_path", default="config.yaml", help="Config file path")
@click.option("--base-url", default=None, help="Override sales.base_url from config")
def sales_smoke_test(config_path: str, base_url: str | None):
    """Create a channel, list channels and trigger a platform sync."""
    run_configured_smoke_test(load_config(config_path).sales, base_url=base_url)


if __name__ == "__main__":
    cli()
