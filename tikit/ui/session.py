"""Issue browsing session: fetch lifecycle, search, filters and selection.

The session is owned by the render thread. The background fetch only
produces a :data:`FetchResult` which is handed to
:meth:`IssueSession.apply_fetch_result` on that thread.
"""

import enum
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from tikit.api.exceptions import FetchInProgressError, InvalidSelection, TikitError
from tikit.api.models import Issue

from .shared_helpers import filter_issues


class FetchState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    POPULATED = "populated"
    FETCH_FAILED = "fetch_failed"


@dataclass(frozen=True)
class FetchSuccess:
    issues: Tuple[Issue, ...]


@dataclass(frozen=True)
class FetchFailure:
    error: Exception


FetchResult = Union[FetchSuccess, FetchFailure]


class StatusMessage(NamedTuple):
    text: str
    is_error: bool = False


FETCHING_MESSAGE = StatusMessage("Fetching Jira tickets...")
NO_TICKETS_MESSAGE = StatusMessage("No tickets found for the provided JQL.")
NO_MATCH_MESSAGE = StatusMessage("No tickets match your criteria.")
CLEAR_MESSAGE = StatusMessage("")


def fetch_issues(jira, jql: str, max_results: Optional[int] = None) -> FetchResult:
    """Run one search and wrap its outcome, never raising tikit errors."""
    try:
        if max_results is None:
            issues = jira.search_issues(jql)
        else:
            issues = jira.search_issues(jql, max_results=max_results)
    except TikitError as e:
        return FetchFailure(e)
    return FetchSuccess(tuple(issues))


def describe_error(error: Exception) -> str:
    """First line of an error, enough for a one line status."""
    text = str(error).strip()
    return text.splitlines()[0] if text else type(error).__name__


class IssueSession:
    """State of one browsing session."""

    def __init__(
        self, filters: Optional[Dict[str, str]] = None, search_text: str = ""
    ):
        self.state = FetchState.IDLE
        self.all_issues: Tuple[Issue, ...] = ()
        self.displayed: List[Issue] = []
        self.search_text = search_text
        self.filters: Dict[str, str] = dict(filters or {})
        self.selected_index: Optional[int] = None
        self.error: Optional[Exception] = None

    def start_fetch(self) -> StatusMessage:
        """Move from idle to fetching, only one fetch per session."""
        if self.state is not FetchState.IDLE:
            raise FetchInProgressError(
                f"Cannot start a fetch while the session is {self.state.value}"
            )
        self.state = FetchState.FETCHING
        return FETCHING_MESSAGE

    def apply_fetch_result(self, result: FetchResult) -> StatusMessage:
        """Install the outcome of the fetch and return the status to show."""
        if self.state is not FetchState.FETCHING:
            raise FetchInProgressError(
                f"No fetch in progress, session is {self.state.value}"
            )

        if isinstance(result, FetchFailure):
            self.state = FetchState.FETCH_FAILED
            self.error = result.error
            return StatusMessage(
                f"Error fetching tickets: {describe_error(result.error)}", True
            )

        self.state = FetchState.POPULATED
        self.all_issues = tuple(result.issues)
        self._recompute()
        if not self.all_issues:
            return NO_TICKETS_MESSAGE
        if not self.displayed:
            return NO_MATCH_MESSAGE
        return CLEAR_MESSAGE

    def set_search(self, search_text: str) -> List[Issue]:
        self.search_text = search_text
        return self._recompute()

    def set_filters(self, filters: Dict[str, str]) -> List[Issue]:
        """Replace the whole filter set."""
        self.filters = dict(filters)
        return self._recompute()

    def _recompute(self) -> List[Issue]:
        self.displayed = filter_issues(self.all_issues, self.search_text, self.filters)
        self.selected_index = 0 if self.displayed else None
        return self.displayed

    def select(self, index: int) -> Issue:
        """Select the issue at ``index`` in the displayed set.

        Raises:
            InvalidSelection: index is outside the displayed set
        """
        if index is None or not 0 <= index < len(self.displayed):
            raise InvalidSelection(index, len(self.displayed))
        self.selected_index = index
        return self.displayed[index]

    @property
    def selected_issue(self) -> Optional[Issue]:
        if self.selected_index is None:
            return None
        if not 0 <= self.selected_index < len(self.displayed):
            return None
        return self.displayed[self.selected_index]
