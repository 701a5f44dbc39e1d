"""Connectivity test — config check → account query → campaign query → diagnosis on failure."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

import click

from adsops.config_google_ads import (
    GoogleAdsConfig,
    GoogleAdsConfigError,
    GoogleAdsConfigFileError,
    load_google_ads_config,
)
from adsops.connectors.google_ads import (
    build_client,
    fetch_account_summary,
    fetch_campaign_names,
)
from adsops.diagnostics import (
    error_message,
    format_error_payload,
    format_hint,
    mask,
    nested_errors,
    select_hint,
)

MAX_CAMPAIGNS_SHOWN = 3


def _report_missing(exc: GoogleAdsConfigError) -> None:
    click.echo(f"❌ Missing environment variables: {', '.join(exc.missing)}", err=True)
    click.echo("\nMake sure you added all credentials to .env file")


def _report_bad_file(exc: GoogleAdsConfigFileError) -> None:
    click.echo(f"❌ Could not read Google Ads config file: {exc}", err=True)
    click.echo("\nFix the file or remove it and use .env instead")


def _report_failure(exc: BaseException, cfg: GoogleAdsConfig) -> None:
    click.echo("❌ Error occurred during connection test\n", err=True)

    click.echo("Full error details:")
    click.echo(format_error_payload(exc))

    message = error_message(exc)
    click.echo(f"\nError message: {message}", err=True)

    details = nested_errors(exc)
    if details:
        click.echo("\nDetailed errors:")
        for i, text in enumerate(details, start=1):
            click.echo(f"{i}. {text}")

    rule = select_hint(message)
    if rule is not None:
        click.echo("")
        for line in format_hint(rule):
            click.echo(line)

    click.echo("\nDebug info:")
    click.echo(f"- Customer ID: {cfg.customer_id}")
    click.echo(f"- Developer Token: {mask(cfg.developer_token, 10)}")
    click.echo(f"- Client ID: {mask(cfg.client_id, 20)}")


def check_connection(
    cfg: GoogleAdsConfig, client_factory: Callable[[GoogleAdsConfig], object] = build_client
) -> bool:
    """Query the account and its campaigns; print a diagnosis on any failure."""
    try:
        client = client_factory(cfg)
        customer_id = cfg.normalized_customer_id

        click.echo("Fetching account information...")
        account = fetch_account_summary(client, customer_id)
        if account is None:
            click.echo("\n⚠️  Connected, but the account query returned no rows.")
            return False

        click.echo("\n✅ Success! Connected to Google Ads\n")
        click.echo("Account Details:")
        click.echo(f"- ID: {account.id}")
        click.echo(f"- Name: {account.descriptive_name}")
        click.echo(f"- Currency: {account.currency_code}")
        click.echo(f"- Timezone: {account.time_zone}")

        names = fetch_campaign_names(client, customer_id)
        click.echo(f"\nFound {len(names)} campaigns")
        if names:
            click.echo(f"First {MAX_CAMPAIGNS_SHOWN} campaigns:")
            for name in names[:MAX_CAMPAIGNS_SHOWN]:
                click.echo(f"- {name}")
    except Exception as exc:
        _report_failure(exc, cfg)
        return False
    return True


def run_connectivity_test(
    environ: Optional[Mapping[str, str]] = None,
    yaml_path: Optional[str] = None,
    client_factory: Callable[[GoogleAdsConfig], object] = build_client,
) -> bool:
    click.echo("Testing Google Ads API connection...\n")
    try:
        cfg = load_google_ads_config(environ=environ, yaml_path=yaml_path)
    except GoogleAdsConfigError as exc:
        _report_missing(exc)
        return False
    except GoogleAdsConfigFileError as exc:
        _report_bad_file(exc)
        return False
    return check_connection(cfg, client_factory=client_factory)
