from pathlib import Path
from typing import Any

import click

from cognito_auth.config.loader import load_config
from cognito_auth.http import HttpxHTTPLayer
from cognito_auth.models import OAuth2Info, OAuth2Settings
from cognito_auth.providers.cognito import DOMAIN_NAME_PROPERTY, AmazonCognitoProvider
from cognito_auth.cli.utils import (
    configure_logging_from_config,
    output_error,
    output_result,
    run_async_cli,
)


@click.command(name="profile")
@click.option(
    "--token",
    envvar="COGNITO_ACCESS_TOKEN",
    required=True,
    help="OAuth2 access token (or set COGNITO_ACCESS_TOKEN)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to cognito-auth.yml",
)
@click.option("--domain", help="User-pool domain name, overrides the configured domainName")
@click.option("--api-url", help="Profile endpoint template, overrides the configured api_url")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def profile(
    token: str,
    config_path: Path | None,
    domain: str | None,
    api_url: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Fetch the normalized Cognito profile for an access token.

    \b
    Examples:
        cognito-auth profile --token eyJraWQi... --domain acme
        COGNITO_ACCESS_TOKEN=eyJraWQi... cognito-auth profile --json-output
        cognito-auth profile --token eyJraWQi... --config ./cognito-auth.yml
    """
    try:
        config = load_config(config_path)
        configure_logging_from_config(config.logging, debug=debug)

        provider = AmazonCognitoProvider(HttpxHTTPLayer(), None, config.cognito)
        if domain or api_url:
            provider = provider.with_settings(lambda s: _override(s, domain, api_url))

        result = run_async_cli(provider.build_profile(OAuth2Info(access_token=token)))
        output_result(_flatten(result.model_dump()), json_output)
    except Exception as e:
        output_error(e, json_output, debug)


def _override(settings: OAuth2Settings, domain: str | None, api_url: str | None) -> OAuth2Settings:
    update: dict[str, Any] = {}
    if domain:
        update["custom_properties"] = {**settings.custom_properties, DOMAIN_NAME_PROPERTY: domain}
    if api_url:
        update["api_url"] = api_url
    return settings.model_copy(update=update)


def _flatten(profile: dict[str, Any]) -> dict[str, Any]:
    login_info = profile.pop("login_info")
    return {
        "provider_id": login_info["provider_id"],
        "provider_key": login_info["provider_key"],
        **profile,
    }
