"""Main issue browser application combining all components."""

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header, Input

from tikit.api.exceptions import InvalidSelection
from tikit.config import defaults

from ..issue_view import issue_type_color, project_issue, status_color
from ..session import NO_MATCH_MESSAGE, IssueSession, StatusMessage
from ..shared_helpers import get_row_data_for_issue
from .actions import IssueBrowserActions
from .base import TikitAppMixin
from .enhanced_widgets import IssueTable, SearchInput
from .views import PLACEHOLDER, IssueDetailPanel, StatusLine

COLUMNS = ("Ticket", "Summary", "Status", "Type", "Assignee")


class IssueBrowserApp(App, TikitAppMixin, IssueBrowserActions):
    """A **Textual** app for browsing the issues of one JQL query."""

    ### ─────────────────────────  Style  ──────────────────────────
    CSS = """
    #left-panel {
        width: 1fr;
        height: 100%;
    }
    #search-input {
        border: round $primary;
    }
    #issues-table {
        height: 1fr;
        border: round $primary;
    }
    """

    ### ─────────────────────────  Key bindings  ──────────────────────────
    BINDINGS = [
        Binding("escape", "quit", "Quit", show=False),
        Binding("q", "quit", "Quit"),
        Binding("/", "focus_search", "Search"),
        Binding("o", "open_issue", "Open"),
        Binding("b", "copy_branch_name", "Branch"),
        Binding("a", "show_actions", "Actions"),
    ]

    ### ─────────────────────────  Lifecycle  ──────────────────────────
    def __init__(
        self,
        config: dict | None = None,
        jql: str | None = None,
        filters: dict | None = None,
        search_text: str = "",
        jira=None,
    ):
        TikitAppMixin.__init__(self, config, jira)
        App.__init__(self)

        self.jql = jql or self.config.get("jql") or defaults.JQL
        self.session = IssueSession(
            filters=filters if filters is not None else self.config.get("filters"),
            search_text=search_text,
        )

    def compose(self) -> ComposeResult:  # type: ignore[override]
        """Create the widget tree."""
        yield Header(show_clock=True)
        with Horizontal():
            with Vertical(id="left-panel"):
                yield SearchInput(
                    value=self.session.search_text,
                    placeholder="Search key or summary",
                    id="search-input",
                )
                yield self._create_datatable()
                yield StatusLine(id="status-line")
            yield IssueDetailPanel(id="detail-panel")
        yield Footer()

    def _create_datatable(self) -> IssueTable:
        table = IssueTable(id="issues-table")
        table.cursor_type = "row"
        table.add_columns(*COLUMNS)
        return table

    def on_mount(self) -> None:  # noqa: D401 – Textual lifecycle method
        self.title = "tikit – Jira tickets"
        self.sub_title = self.jql
        table = self.query_one(IssueTable)
        table.border_title = "Your Jira Tickets (Enter for options)"
        self.query_one(SearchInput).focus()
        self.start_fetch()

    ### ─────────────────────────  Rendering  ──────────────────────────
    def set_status(self, message: StatusMessage) -> None:
        self.query_one(StatusLine).show_status(message)

    def render_issues(self) -> None:
        """Rebuild the table from the displayed set and show the first issue."""
        table = self.query_one(IssueTable)
        table.clear()
        for issue in self.session.displayed:
            key, summary, status, issue_type, assignee = get_row_data_for_issue(issue)
            table.add_row(
                Text(key),
                Text(summary),
                Text(status, style=status_color(status)),
                Text(issue_type, style=issue_type_color(issue_type)),
                Text(assignee),
            )

        detail_panel = self.query_one(IssueDetailPanel)
        if not self.session.displayed:
            if self.session.all_issues:
                detail_panel.show_message(NO_MATCH_MESSAGE.text)
            else:
                detail_panel.show_message(PLACEHOLDER)
            return
        table.move_cursor(row=0)
        self.show_issue(0)

    def show_issue(self, index: int) -> None:
        try:
            issue = self.session.select(index)
        except InvalidSelection:
            self.query_one(IssueDetailPanel).show_message(PLACEHOLDER)
            return
        self.query_one(IssueDetailPanel).show_issue(project_issue(issue))

    ### ─────────────────────────  Events  ──────────────────────────
    @on(Input.Changed, "#search-input")
    def _handle_search_changed(self, event: Input.Changed) -> None:
        self.session.set_search(event.value)
        self.render_issues()

    @on(DataTable.RowHighlighted, "#issues-table")
    def _handle_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Update the detail pane whenever the cursor highlights a new row."""
        if event.cursor_row != self.session.selected_index or (
            self.query_one(IssueDetailPanel).current is None
        ):
            self.show_issue(event.cursor_row)

    @on(DataTable.RowSelected, "#issues-table")
    def _handle_row_selected(self, _event: DataTable.RowSelected) -> None:
        self.action_show_actions()

    @on(SearchInput.Leave)
    def _handle_search_leave(self, _event: SearchInput.Leave) -> None:
        self.action_focus_issues()

    @on(IssueTable.TopReached)
    def _handle_table_top(self, _event: IssueTable.TopReached) -> None:
        self.action_focus_search()


### ─────────────────────────  Public helper  ──────────────────────────
def run_textual_browser(
    config: dict, jql: str, filters: dict | None = None, search_text: str = ""
) -> None:
    """Launch the **IssueBrowserApp** until the user quits."""
    app = IssueBrowserApp(config, jql, filters, search_text)
    app.run()
