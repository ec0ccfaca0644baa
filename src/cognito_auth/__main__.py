import click

from cognito_auth.cli.profile import profile
from cognito_auth.cli.show_config import show_config
from cognito_auth.version import PACKAGE_VERSION


@click.group(invoke_without_command=True)
@click.version_option(PACKAGE_VERSION, prog_name="cognito-auth")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Amazon Cognito profile adapter CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(profile)
cli.add_command(show_config)


if __name__ == "__main__":
    cli()
