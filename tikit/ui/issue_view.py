"""Detail projection of a single issue."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from rich.markup import escape

from tikit import utils
from tikit.api.models import Comment, Issue, User
from tikit.config import defaults
from tikit.utils import adf

from .shared_helpers import assignee_name

NO_DESCRIPTION = "No description."
NO_COMMENTS = "No comments."
UNKNOWN_PERSON = "Unknown"


def status_color(status: str) -> str:
    return defaults.STATUS_COLORS.get(status.lower(), defaults.DEFAULT_COLOR)


def issue_type_color(issue_type: str) -> str:
    return defaults.ISSUE_TYPE_COLORS.get(issue_type.lower(), defaults.DEFAULT_COLOR)


def priority_color(priority: str) -> str:
    return defaults.PRIORITY_COLORS.get(priority.lower(), defaults.DEFAULT_COLOR)


def person_name(user: Optional[User]) -> str:
    if user is None or not user.display_name:
        return UNKNOWN_PERSON
    return user.display_name


def format_description(description: Any) -> str:
    if description is None:
        return NO_DESCRIPTION
    if isinstance(description, dict):
        text = adf.extract_text_from_adf(description)
    else:
        text = str(description)
    return text if text.strip() else NO_DESCRIPTION


def format_comment(comment: Comment) -> str:
    created = utils.show_time(comment.created, defaults.DISPLAY_DATE_FORMAT)
    return f"- {person_name(comment.author)} ({created}): {comment.body}"


def format_comments(comments: Optional[Sequence[Comment]]) -> str:
    if not comments:
        return NO_COMMENTS
    return "\n".join(format_comment(comment) for comment in comments)


@dataclass(frozen=True)
class DetailView:
    """Human readable lines describing one issue."""

    key: str
    summary: str
    status: str
    status_color: str
    issue_type: str
    issue_type_color: str
    priority: str
    priority_color: str
    assignee: str
    reporter: str
    created: str
    updated: str
    description: str
    comments: str

    def to_markup(self) -> str:
        """Render as Rich console markup, user supplied text escaped."""
        lines = [
            f"[b]Key:[/b] [yellow]{escape(self.key)}[/]",
            f"[b]Summary:[/b] [yellow]{escape(self.summary)}[/]",
            f"[b]Status:[/b] [{self.status_color}]{escape(self.status)}[/]",
            f"[b]Issue Type:[/b] [{self.issue_type_color}]{escape(self.issue_type)}[/]",
            f"[b]Priority:[/b] [{self.priority_color}]{escape(self.priority)}[/]",
            f"[b]Assignee:[/b] [yellow]{escape(self.assignee)}[/]",
            f"[b]Reporter:[/b] [yellow]{escape(self.reporter)}[/]",
            f"[b]Created:[/b] [yellow]{self.created}[/]",
            f"[b]Updated:[/b] [yellow]{self.updated}[/]",
            "",
            "[b]Description:[/b]",
            f"[grey70]{escape(self.description)}[/]",
            "",
            "[b]Comments:[/b]",
            f"[grey70]{escape(self.comments)}[/]",
        ]
        return "\n".join(lines)


def project_issue(issue: Issue) -> DetailView:
    """Project an issue into its detail view, with defaults for absent fields."""
    priority = issue.priority.name if issue.priority and issue.priority.name else "None"
    return DetailView(
        key=issue.key,
        summary=issue.summary,
        status=issue.status.name,
        status_color=status_color(issue.status.name),
        issue_type=issue.issue_type.name,
        issue_type_color=issue_type_color(issue.issue_type.name),
        priority=priority,
        priority_color=priority_color(priority),
        assignee=assignee_name(issue),
        reporter=person_name(issue.reporter),
        created=utils.show_time(issue.created),
        updated=utils.show_time(issue.updated),
        description=format_description(issue.description),
        comments=format_comments(issue.comments),
    )
