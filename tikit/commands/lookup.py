"""Lookup commands listing the auxiliary Jira catalogs."""

import click

from ..api import jira_client
from ..ui.issue_view import status_color
from .common import cli


@cli.command("statuses")
@click.pass_obj
def statuses(wconfig):
    """List the statuses known to the server"""
    jira = jira_client.JiraHTTP(wconfig)
    for status in jira.get_statuses():
        click.secho(f"  {status.name}", fg=_click_color(status_color(status.name)))


@cli.command("users")
@click.option("--query", "-q", default=".", help="User search query")
@click.pass_obj
def users(wconfig, query):
    """List users matching a query (all active users by default)"""
    jira = jira_client.JiraHTTP(wconfig)
    for user in jira.get_users(query=query):
        click.secho(f"  {user.display_name}", fg="cyan", nl=False)
        if user.email_address:
            click.secho(f" - {user.email_address}", italic=True, nl=False)
        click.echo()


@cli.command("boards")
@click.pass_obj
def boards(wconfig):
    """List the agile boards"""
    jira = jira_client.JiraHTTP(wconfig)
    for board in jira.get_boards():
        click.secho(f"  {board.id:>6}", fg="yellow", nl=False)
        click.secho(f"  {board.name}", fg="cyan", nl=False)
        if board.type:
            click.secho(f" ({board.type})", italic=True, nl=False)
        click.echo()


@cli.command("sprints")
@click.argument("board_id", type=int)
@click.pass_obj
def sprints(wconfig, board_id):
    """List the sprints of BOARD_ID"""
    jira = jira_client.JiraHTTP(wconfig)
    for sprint in jira.get_sprints(board_id):
        click.secho(f"  {sprint.id:>6}", fg="yellow", nl=False)
        click.secho(f"  {sprint.name}", fg="cyan", nl=False)
        if sprint.state:
            click.secho(f" [{sprint.state}]", italic=True, nl=False)
        click.echo()


def _click_color(color: str) -> str:
    # click only knows the basic ANSI names
    return color if color in ("red", "green", "yellow", "blue", "white") else "magenta"
