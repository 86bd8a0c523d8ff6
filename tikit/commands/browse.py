"""Browse command for tikit."""

import click

from .. import config, utils
from ..ui.tui import run_textual_browser
from .common import cli


@cli.command("browse")
@click.option("--jql", "-q", help="JQL query selecting the tickets to fetch")
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    help="Filter tickets by field, one of status, issueType, assignee "
    "(e.g. 'status=In Progress', 'assignee=Unassigned')",
)
@click.option("--search", "-s", default="", help="Initial search text")
@click.pass_obj
def browse(wconfig, jql, filters, search):
    """
    Browse your tickets

    Tickets are fetched once for the query (the configured one by default,
    otherwise your own tickets, newest first) and can then be narrowed by
    typing in the search box.

    Example: tikit browse --jql 'project = ABC' --filter status=Done
    """
    jql = jql or wconfig["jql"]
    filter_set = dict(wconfig.get("filters") or {})
    filter_set.update(config.parse_filters(filters))

    utils.log(
        f"Browsing JQL: {jql} Filters: {filter_set}",
        "DEBUG",
        verbose_only=True,
        verbose=wconfig.get("verbose"),
    )

    run_textual_browser(wconfig, jql, filter_set, search)
