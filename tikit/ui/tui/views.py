"""UI views and screens for the issue browser."""

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Label, Static

from ..issue_view import DetailView
from ..session import StatusMessage
from .base import BaseModalScreen

OPEN_IN_BROWSER = "open"
GENERATE_BRANCH_NAME = "branch"

PLACEHOLDER = "Select a ticket to view details."


class StatusLine(Static):
    """One line of green (info) or red (error) feedback."""

    DEFAULT_CSS = """
    StatusLine {
        height: 3;
        border: round $primary;
        content-align: center middle;
        text-align: center;
    }
    """

    last_message: StatusMessage | None = None

    def show_status(self, message: StatusMessage) -> None:
        color = "red" if message.is_error else "green"
        self.last_message = message
        if not message.text:
            self.update("")
            return
        self.update(f"[{color}]{escape(message.text)}[/]")


class IssueDetailPanel(VerticalScroll):
    """Panel showing the projection of the selected issue."""

    DEFAULT_CSS = """
    IssueDetailPanel {
        width: 1fr;
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }
    """

    current: DetailView | None = None

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Static(PLACEHOLDER, id="detail-content")

    def on_mount(self) -> None:
        self.border_title = "Ticket Details"

    def show_issue(self, view: DetailView) -> None:
        self.current = view
        self.query_one("#detail-content", Static).update(view.to_markup())
        self.styles.border = ("round", view.status_color)
        self.scroll_home(animate=False)

    def show_message(self, text: str) -> None:
        self.current = None
        self.query_one("#detail-content", Static).update(escape(text))


class ActionMenuScreen(BaseModalScreen):
    """Modal listing the actions available on the selected issue."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Close"),
    ]

    DEFAULT_CSS = """
    ActionMenuScreen {
        align: center middle;
    }
    #actions-container {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }
    #actions-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #actions-buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }
    #actions-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, issue_key: str):
        super().__init__()
        self.issue_key = issue_key

    def compose(self) -> ComposeResult:
        with Vertical(id="actions-container"):
            yield Label(
                f"What do you want to do with {escape(self.issue_key)}?",
                id="actions-title",
            )
            with Horizontal(id="actions-buttons"):
                yield Button("Open in Browser", id=OPEN_IN_BROWSER, variant="primary")
                yield Button("Generate Branch Name", id=GENERATE_BRANCH_NAME)
                yield Button("Cancel", id="cancel")

    @on(Button.Pressed)
    def _handle_button(self, event: Button.Pressed) -> None:
        if event.button.id in (OPEN_IN_BROWSER, GENERATE_BRANCH_NAME):
            self.safe_dismiss(event.button.id)
        else:
            self.safe_dismiss(None)
