"""TUI components for the issue browser."""

from .actions import IssueBrowserActions
from .app import IssueBrowserApp, run_textual_browser
from .base import BaseModalScreen, TikitAppMixin
from .enhanced_widgets import IssueTable, SearchInput
from .views import ActionMenuScreen, IssueDetailPanel, StatusLine

__all__ = [
    "IssueBrowserApp",
    "run_textual_browser",
    "IssueBrowserActions",
    "TikitAppMixin",
    "BaseModalScreen",
    "IssueTable",
    "SearchInput",
    "ActionMenuScreen",
    "IssueDetailPanel",
    "StatusLine",
]
