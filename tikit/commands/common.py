"""Common utilities and helpers for tikit CLI commands."""

import os
import pathlib

import click

from .. import config, utils


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--insecure", is_flag=True, help="Disable SSL verification for requests")
@click.option(
    "--jira-server",
    default=os.environ.get("JIRA_SERVER"),
    help="Jira server URL",
)
@click.option(
    "--jira-email",
    default=os.environ.get("JIRA_EMAIL"),
    help="Jira account email (defaults to $JIRA_EMAIL)",
)
@click.option(
    "--jira-api-token",
    default=os.environ.get("JIRA_API_TOKEN"),
    help="Jira API token (defaults to $JIRA_API_TOKEN)",
)
@click.option("--timeout", "-t", type=float, help="Request timeout in seconds")
@click.option(
    "-c",
    "--config-file",
    default=config.defaults.CONFIG_FILE,
    help="Config file to use",
)
@click.option("--quiet", is_flag=True, help="Suppress non-error output")
@click.pass_context
def cli(
    ctx,
    verbose,
    insecure,
    jira_server,
    jira_email,
    jira_api_token,
    timeout,
    config_file,
    quiet,
):
    """Browse and act on Jira tickets from the terminal"""

    flag_config = {
        "jira_server": jira_server,
        "jira_email": jira_email,
        "jira_api_token": jira_api_token,
        "timeout": timeout,
        "verbose": verbose,
        "quiet": quiet,
        "insecure": insecure or None,
    }
    wconfig = config.make_config(flag_config, pathlib.Path(config_file))
    shown = {k: v for k, v in wconfig.items() if k != "jira_api_token"}
    utils.log(f"Using config: {shown}", verbose=verbose, verbose_only=True)
    ctx.obj = wconfig
