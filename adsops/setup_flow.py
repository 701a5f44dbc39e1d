"""Interactive Google Ads credential setup: prompts → consent URL → code exchange → .env lines."""

from __future__ import annotations

from typing import Callable, Optional

import click
import requests

from adsops.config import OAuthConfig
from adsops.oauth import (
    CredentialBundle,
    build_authorization_url,
    exchange_code,
    format_env_block,
)

RULE = "=" * 50


def _print_instructions(auth_url: str, redirect_uri: str) -> None:
    click.echo("")
    click.echo(RULE)
    click.echo("Step 1: Open this URL in your browser:\n")
    click.echo(auth_url)
    click.echo("")
    click.echo(RULE)
    click.echo(f"\nStep 2: After authorizing, you'll be redirected to {redirect_uri}")
    click.echo("The page will fail to load (that's OK!)")
    click.echo("\nStep 3: Look at the URL bar - it will contain:")
    click.echo(f"{redirect_uri}/?code=XXXXXXXXX&scope=...")
    click.echo("\nCopy ONLY the code value (between code= and &)")
    click.echo(RULE + "\n")


def _print_success(bundle: CredentialBundle) -> None:
    click.echo("\n✅ Success! Add these to your .env file:\n")
    for line in format_env_block(bundle):
        click.echo(line)
    click.echo("")
    click.echo(RULE)
    click.echo("Next steps:")
    click.echo("1. Add these to your .env file")
    click.echo("2. Get your Customer ID from Google Ads (top right)")
    click.echo("3. Run: adsops google-ads test")
    click.echo(RULE)


def _print_token_error(error: str, description: Optional[str], redirect_uri: str) -> None:
    click.echo(f"\n❌ Error: {error}", err=True)
    click.echo(f"Description: {description}", err=True)
    click.echo("\nCommon issues:")
    click.echo("- Make sure the code is copied correctly")
    click.echo("- The code expires quickly, try again if needed")
    click.echo(f"- Check that redirect URI matches exactly: {redirect_uri}")


def run_credential_setup(
    prompt: Callable[..., str] = click.prompt,
    exchange: Callable[..., object] = exchange_code,
    oauth_cfg: Optional[OAuthConfig] = None,
) -> bool:
    """Walk the user through obtaining a refresh token.

    Returns True when a refresh token was received and printed. Remote and
    transport failures are reported on the console, never raised.
    """
    cfg = oauth_cfg or OAuthConfig()

    click.echo("===========================================")
    click.echo("Google Ads API - Simple Setup")
    click.echo("===========================================\n")

    client_id = prompt("Enter your Client ID")
    client_secret = prompt("Enter your Client Secret")
    developer_token = prompt("Enter your Developer Token")

    auth_url = build_authorization_url(
        client_id,
        redirect_uri=cfg.redirect_uri,
        scope=cfg.scope,
        auth_endpoint=cfg.auth_endpoint,
    )
    _print_instructions(auth_url, cfg.redirect_uri)

    code = prompt("Paste the authorization code here")

    try:
        tokens = exchange(
            code,
            client_id,
            client_secret,
            redirect_uri=cfg.redirect_uri,
            token_endpoint=cfg.token_endpoint,
            timeout=cfg.timeout_seconds,
        )
    except (requests.RequestException, ValueError) as exc:
        click.echo(f"\n❌ Error: {exc}", err=True)
        return False

    if tokens.kind == "success":
        _print_success(
            CredentialBundle(
                client_id=client_id,
                client_secret=client_secret,
                developer_token=developer_token,
                refresh_token=tokens.refresh_token,
            )
        )
        return True

    if tokens.kind == "error":
        _print_token_error(tokens.error, tokens.error_description, cfg.redirect_uri)
    else:
        click.echo(f"\n❌ Unexpected response: {tokens.raw}", err=True)
    return False
