"""Tests for Textual issue browser app behavior."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from tikit.api.exceptions import RequestTimeoutError, SideEffectError
from tikit.ui.session import FetchState, FetchSuccess, IssueSession
from tikit.ui.tui.actions import IssueBrowserActions
from tikit.ui.tui.app import IssueBrowserApp, run_textual_browser
from tikit.ui.tui.enhanced_widgets import IssueTable
from tikit.ui.tui.views import (
    GENERATE_BRANCH_NAME,
    OPEN_IN_BROWSER,
    IssueDetailPanel,
    StatusLine,
)


class FakeJira:
    """Jira client stand-in returning canned issues or raising an error."""

    def __init__(self, issues=None, error=None):
        self.issues = issues or []
        self.error = error
        self.calls = []

    def search_issues(self, jql, max_results=100):
        self.calls.append((jql, max_results))
        if self.error:
            raise self.error
        return list(self.issues)


class DummyApp(IssueBrowserActions):
    """Minimal app stub for testing action handlers."""

    def __init__(self, issues, cursor_row=0, server="https://test-jira.example.com"):
        self.config = {"jira_server": server}
        self.verbose = False
        self.session = IssueSession()
        self.session.start_fetch()
        self.session.apply_fetch_result(FetchSuccess(tuple(issues)))
        self.table = SimpleNamespace(cursor_row=cursor_row)
        self.statuses = []
        self.pushed = []

    def query_one(self, _selector, *_args):
        return self.table

    def set_status(self, message):
        self.statuses.append(message)

    def push_screen(self, screen, callback=None):
        self.pushed.append((screen, callback))

    def log(self, *_args, **_kwargs):
        pass


def test_row_selected_opens_action_menu():
    """Pressing Enter on a row shows the actions for that row."""
    app = SimpleNamespace(show_actions_calls=0)

    def action_show_actions():
        app.show_actions_calls += 1

    app.action_show_actions = action_show_actions

    IssueBrowserApp._handle_row_selected(app, object())  # type: ignore[arg-type]

    assert app.show_actions_calls == 1


def test_copy_branch_name(issue_factory):
    app = DummyApp([issue_factory("ABC-2", summary="Fix login bug!")])

    with patch("tikit.ui.tui.actions.clipboard.copy_to_clipboard") as mock_copy:
        app.action_copy_branch_name()

    mock_copy.assert_called_once_with("feature/ABC-2-fix-login-bug")
    assert app.statuses[-1].text == "Copied to clipboard: feature/ABC-2-fix-login-bug"
    assert not app.statuses[-1].is_error


def test_copy_branch_name_failure(issue_factory):
    app = DummyApp([issue_factory("ABC-2")])

    with patch(
        "tikit.ui.tui.actions.clipboard.copy_to_clipboard",
        side_effect=SideEffectError("No clipboard support on platform 'unknown'"),
    ):
        app.action_copy_branch_name()

    assert app.statuses[-1].is_error
    assert "No clipboard support" in app.statuses[-1].text


def test_open_issue(issue_factory, mock_browser_open):
    app = DummyApp([issue_factory("ABC-1")])

    app.action_open_issue()

    mock_browser_open.assert_called_once_with(
        "https://test-jira.example.com/browse/ABC-1"
    )
    assert app.statuses[-1].text == "Opening ABC-1..."


def test_open_issue_without_server(issue_factory, mock_browser_open):
    app = DummyApp([issue_factory("ABC-1")], server=None)

    app.action_open_issue()

    mock_browser_open.assert_not_called()
    assert app.statuses[-1].is_error


def test_stale_cursor_is_rejected(issue_factory, mock_browser_open):
    """A cursor beyond the displayed issues never reaches a side effect."""
    app = DummyApp([issue_factory("ABC-1")], cursor_row=3)

    app.action_open_issue()

    mock_browser_open.assert_not_called()
    assert app.statuses[-1].text == "Invalid issue selection."
    assert app.statuses[-1].is_error


def test_action_menu_choice_dispatch(issue_factory):
    app = DummyApp([issue_factory("ABC-1")])
    with patch("tikit.ui.tui.actions.ActionMenuScreen") as mock_screen:
        app.action_show_actions()

    mock_screen.assert_called_once_with("ABC-1")
    _screen, callback = app.pushed[0]

    with patch("tikit.ui.tui.actions.clipboard.copy_to_clipboard"):
        callback(GENERATE_BRANCH_NAME)
    assert app.statuses[-1].text.startswith("Copied to clipboard:")

    with patch("tikit.ui.tui.actions.utils.browser_open_ticket") as mock_open:
        callback(OPEN_IN_BROWSER)
        callback(None)
    mock_open.assert_called_once()


@pytest.mark.asyncio
async def test_browser_fetches_and_filters(sample_config, sample_issues):
    jira = FakeJira(sample_issues)
    app = IssueBrowserApp(config=sample_config, jql="project = TEST", jira=jira)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        table = app.query_one(IssueTable)
        assert jira.calls == [("project = TEST", 100)]
        assert app.session.state is FetchState.POPULATED
        assert table.row_count == 3
        assert app.query_one(IssueDetailPanel).current.key == "TEST-123"
        assert app.query_one(StatusLine).last_message.text == ""

        await pilot.press(*"login")
        await pilot.pause()
        assert [i.key for i in app.session.displayed] == ["TEST-123", "TEST-125"]
        assert table.row_count == 2

        await pilot.press("down")
        await pilot.pause()
        assert table.has_focus

        with patch("tikit.ui.tui.actions.clipboard.copy_to_clipboard") as mock_copy:
            await pilot.press("b")
            await pilot.pause()
        mock_copy.assert_called_once_with("feature/TEST-123-fix-login-page")

        await pilot.press("up")
        await pilot.pause()
        assert app.query_one("#search-input").has_focus


@pytest.mark.asyncio
async def test_browser_initial_filters(sample_config, sample_issues):
    app = IssueBrowserApp(
        config=sample_config,
        jql="project = TEST",
        filters={"assignee": "Unassigned"},
        jira=FakeJira(sample_issues),
    )

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert [i.key for i in app.session.displayed] == ["TEST-124"]
        assert app.query_one(IssueTable).row_count == 1


@pytest.mark.asyncio
async def test_browser_fetch_failure(sample_config):
    jira = FakeJira(error=RequestTimeoutError("search", 20))
    app = IssueBrowserApp(config=sample_config, jql="project = TEST", jira=jira)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        status = app.query_one(StatusLine).last_message
        assert app.session.state is FetchState.FETCH_FAILED
        assert status.is_error
        assert status.text.startswith("Error fetching tickets: Request to search")
        assert app.query_one(IssueTable).row_count == 0
        assert app.query_one(IssueDetailPanel).current is None


def test_run_textual_browser_runs_app(sample_config):
    with patch("tikit.ui.tui.app.IssueBrowserApp") as mock_app_class:
        result = run_textual_browser(
            sample_config, "project = TEST", {"status": "Done"}, "login"
        )

    mock_app_class.assert_called_once_with(
        sample_config, "project = TEST", {"status": "Done"}, "login"
    )
    mock_app_class.return_value.run.assert_called_once_with()
    assert result is None
