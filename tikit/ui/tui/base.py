"""Base classes and mixins for the TUI components."""

from textual.screen import ModalScreen

from tikit.api import jira_client


class TikitAppMixin:
    """Mixin providing the config and Jira client to apps."""

    def __init__(self, config: dict | None = None, jira=None):
        self.config = config or {}
        self.verbose = self.config.get("verbose", False)
        self.jira = jira or jira_client.JiraHTTP(self.config)


class BaseModalScreen(ModalScreen[str]):
    """Base class for modal screens in the issue browser."""

    def __init__(self):
        super().__init__()
        self._dismissed = False

    def action_cancel(self) -> None:
        """Cancel and close the modal."""
        self.safe_dismiss(None)

    def safe_dismiss(self, result: str | None) -> bool:
        """Dismiss once, returns False if the screen was already dismissed."""
        if not self._dismissed and self.is_mounted:
            self._dismissed = True
            self.dismiss(result)
            return True
        return False
