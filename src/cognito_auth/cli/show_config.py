from pathlib import Path

import click

from cognito_auth.config.loader import load_config
from cognito_auth.cli.utils import output_error, output_result


@click.command(name="show-config")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to cognito-auth.yml",
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def show_config(config_path: Path | None, json_output: bool, debug: bool) -> None:
    """Show the effective provider settings with secrets masked."""
    try:
        config = load_config(config_path)
        output_result(config.cognito.masked_dump(), json_output)
    except Exception as e:
        output_error(e, json_output, debug)
