"""Jira HTTP API client returning typed records."""

from typing import Any, Dict, List, Optional

import click

from ..config import defaults
from ..utils import log
from . import auth, request_handler
from .models import Board, Issue, Sprint, Status, User, parse_list


class JiraHTTP:
    """Read-only Jira client for issue search and the auxiliary catalogs."""

    def __init__(self, config: Dict[str, Any]):
        """Initialize the Jira client.

        Args:
            config: Configuration dictionary with Jira settings
        """
        self.config = config
        self.verbose = config.get("verbose", False)

        server = config.get("jira_server")
        if not server:
            raise click.ClickException("jira_server not configured")
        self.server = server

        self.authenticator = auth.create_authenticator(config)
        self.headers = {"Accept": "application/json"}
        self.headers.update(self.authenticator.get_headers())

        handler_options = {
            "headers": self.headers,
            "timeout": config.get("timeout") or defaults.REQUEST_TIMEOUT,
            "verbose": self.verbose,
            "insecure": config.get("insecure", False),
            "quiet": config.get("quiet", False),
        }
        self.request_handler = request_handler.JiraRequestHandler(
            base_url=f"{server}{defaults.API_PATH}", **handler_options
        )
        self.agile_handler = request_handler.JiraRequestHandler(
            base_url=f"{server}{defaults.AGILE_API_PATH}", **handler_options
        )

        if self.verbose:
            log(
                f"Initialized JiraHTTP: server={server}, "
                f"timeout={handler_options['timeout']}, insecure={handler_options['insecure']}"
            )

    def search_issues(
        self,
        jql: str,
        max_results: int = defaults.MAX_RESULTS,
        fields: Optional[List[str]] = None,
        label: Optional[str] = None,
    ) -> List[Issue]:
        """Search for issues using JQL, one bounded page in remote order."""
        params = {
            "jql": jql,
            "maxResults": max_results,
            "fields": ",".join(fields or defaults.FIELDS),
            "expand": "renderedFields",
        }

        if self.verbose:
            log(
                f"Searching issues with JQL: '{click.style(jql, fg='cyan')}' "
                f"Params: '{click.style(params['fields'], fg='cyan')}'",
            )
            log(f"Max results: {max_results}")

        response = self.request_handler.request(
            "GET", "search", params=params, label=label
        )
        return parse_list(response, Issue, envelope="issues")

    def get_statuses(self, label: Optional[str] = "Fetching statuses") -> List[Status]:
        """Get all statuses known to the server."""
        response = self.request_handler.request("GET", "status", label=label)
        return parse_list(response, Status)

    def get_users(
        self, query: str = ".", label: Optional[str] = "Fetching users"
    ) -> List[User]:
        """Search users, ``.`` matches every active user on Jira Cloud."""
        response = self.request_handler.request(
            "GET", "user/search", params={"query": query}, label=label
        )
        return parse_list(response, User)

    def get_boards(self, label: Optional[str] = "Fetching boards") -> List[Board]:
        """Get all agile boards."""
        response = self.agile_handler.request("GET", "board", label=label)
        return parse_list(response, Board, envelope="values")

    def get_sprints(
        self, board_id: int, label: Optional[str] = "Fetching sprints"
    ) -> List[Sprint]:
        """Get the sprints of one agile board."""
        response = self.agile_handler.request(
            "GET", f"board/{board_id}/sprint", label=label
        )
        return parse_list(response, Sprint, envelope="values")
