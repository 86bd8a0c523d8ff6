"""Action handlers for the issue browser application."""

from __future__ import annotations

from typing import Any, cast

from tikit import utils
from tikit.api.exceptions import InvalidSelection, SideEffectError
from tikit.utils import branch, clipboard

from ..session import FetchResult, StatusMessage, fetch_issues
from .enhanced_widgets import IssueTable
from .views import GENERATE_BRANCH_NAME, OPEN_IN_BROWSER, ActionMenuScreen


class IssueBrowserActions:
    """
    Mixin class containing the action handlers for the issue browser.

    This class should be mixed with a Textual App that has the following attributes:
    - run_worker, call_from_thread, push_screen, query_one, exit, log (from Textual App)
    - session, jira, config, jql (app-specific)
    - set_status, render_issues methods
    """

    def start_fetch(self) -> None:
        """Start the one background fetch of this session."""
        app = cast(Any, self)
        app.set_status(app.session.start_fetch())
        app.run_worker(
            self._fetch_worker,
            name="fetch-issues",
            exclusive=True,
            thread=True,
        )

    def _fetch_worker(self) -> None:
        """Worker method, runs off the render thread and only hands off a result."""
        app = cast(Any, self)
        result = fetch_issues(app.jira, app.jql, app.config.get("max_results"))
        app.call_from_thread(self._apply_fetch_result, result)

    def _apply_fetch_result(self, result: FetchResult) -> None:
        app = cast(Any, self)
        status = app.session.apply_fetch_result(result)
        if app.verbose:
            app.log(
                f"Fetch finished: {app.session.state.value}, "
                f"{len(app.session.all_issues)} issues"
            )
        app.render_issues()
        app.set_status(status)

    def _current_issue(self):
        """Re-validate the table cursor against the displayed set."""
        app = cast(Any, self)
        table = app.query_one(IssueTable)
        try:
            return app.session.select(table.cursor_row)
        except InvalidSelection as exc:
            app.log(f"{exc}")
            app.set_status(StatusMessage("Invalid issue selection.", True))
            return None

    def action_show_actions(self) -> None:  # noqa: D401
        """Open the action menu for the selected issue."""
        app = cast(Any, self)
        issue = self._current_issue()
        if issue is None:
            return
        app.push_screen(ActionMenuScreen(issue.key), self._handle_action_choice)

    def _handle_action_choice(self, choice: str | None) -> None:
        if choice == OPEN_IN_BROWSER:
            self.action_open_issue()
        elif choice == GENERATE_BRANCH_NAME:
            self.action_copy_branch_name()

    def action_open_issue(self) -> None:  # noqa: D401
        """Open the selected issue in the browser."""
        app = cast(Any, self)
        issue = self._current_issue()
        if issue is None:
            return
        try:
            utils.browser_open_ticket(issue.key, app.config.get("jira_server"))
        except SideEffectError as exc:
            app.set_status(StatusMessage(str(exc), True))
            return
        app.set_status(StatusMessage(f"Opening {issue.key}..."))

    def action_copy_branch_name(self) -> None:  # noqa: D401
        """Copy a branch name for the selected issue to the clipboard."""
        app = cast(Any, self)
        issue = self._current_issue()
        if issue is None:
            return
        branch_name = branch.generate_branch_name(issue)
        try:
            clipboard.copy_to_clipboard(branch_name)
        except SideEffectError as exc:
            app.set_status(StatusMessage(str(exc), True))
            return
        app.set_status(StatusMessage(f"Copied to clipboard: {branch_name}"))

    def action_focus_search(self) -> None:  # noqa: D401
        """Move focus to the search box."""
        cast(Any, self).query_one("#search-input").focus()

    def action_focus_issues(self) -> None:  # noqa: D401
        """Move focus to the issue table."""
        cast(Any, self).query_one(IssueTable).focus()
