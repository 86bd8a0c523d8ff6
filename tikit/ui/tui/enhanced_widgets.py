"""Search input and issue table widgets with focus hand-off keybindings."""

from textual.binding import Binding
from textual.message import Message
from textual.widgets import DataTable, Input


class SearchInput(Input):
    """Search box; down arrow moves focus to the issue table."""

    BINDINGS = [
        Binding("down", "leave", "To issues", show=False),
    ]

    class Leave(Message):
        """Posted when the user navigates out of the search box."""

    def action_leave(self) -> None:
        self.post_message(self.Leave())


class IssueTable(DataTable):
    """Issue list; up arrow on the first row moves focus to the search box."""

    class TopReached(Message):
        """Posted when the cursor tries to move above the first row."""

    def action_cursor_up(self) -> None:
        if self.cursor_row <= 0:
            self.post_message(self.TopReached())
            return
        super().action_cursor_up()
