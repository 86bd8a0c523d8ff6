"""Typed records for Jira API responses."""

import datetime
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .. import utils
from .exceptions import ParseError


def _name(data: Any) -> str:
    if isinstance(data, dict):
        return str(data.get("name") or "")
    return ""


@dataclass(frozen=True)
class User:
    display_name: str
    email_address: Optional[str] = None
    account_id: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Optional[Dict[str, Any]]) -> Optional["User"]:
        """Build a user, ``None`` when Jira sent no person."""
        if not isinstance(data, dict):
            return None
        return cls(
            display_name=str(data.get("displayName") or data.get("name") or ""),
            email_address=data.get("emailAddress"),
            account_id=data.get("accountId"),
        )


@dataclass(frozen=True)
class Status:
    name: str

    @classmethod
    def from_api_response(cls, data: Any) -> "Status":
        return cls(name=_name(data))


@dataclass(frozen=True)
class IssueType:
    name: str

    @classmethod
    def from_api_response(cls, data: Any) -> "IssueType":
        return cls(name=_name(data))


@dataclass(frozen=True)
class Priority:
    name: str

    @classmethod
    def from_api_response(cls, data: Any) -> Optional["Priority"]:
        if not isinstance(data, dict):
            return None
        return cls(name=_name(data))


@dataclass(frozen=True)
class Comment:
    author: Optional[User]
    body: str
    created: datetime.datetime
    updated: datetime.datetime

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Comment":
        if not isinstance(data, dict):
            raise ParseError(f"Invalid comment payload: {data!r}")
        return cls(
            author=User.from_api_response(data.get("author")),
            body=str(data.get("body") or ""),
            created=utils.parse_time(data.get("created")),
            updated=utils.parse_time(data.get("updated")),
        )


@dataclass(frozen=True)
class Issue:
    """A Jira issue as fetched; never mutated afterwards."""

    id: str
    key: str
    summary: str
    status: Status
    issue_type: IssueType
    created: datetime.datetime
    updated: datetime.datetime
    assignee: Optional[User] = None
    reporter: Optional[User] = None
    priority: Optional[Priority] = None
    description: Optional[Any] = None
    comments: Optional[Tuple[Comment, ...]] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Issue":
        """Build an issue from one element of a search response.

        Raises:
            ParseError: the payload is not an object or a timestamp is malformed
        """
        if not isinstance(data, dict):
            raise ParseError(f"Invalid issue payload: {data!r}")
        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            raise ParseError(f"Invalid fields for issue {data.get('key')}")

        comments = None
        comment_field = fields.get("comment")
        if (
            isinstance(comment_field, dict)
            and comment_field.get("comments") is not None
        ):
            if not isinstance(comment_field["comments"], list):
                raise ParseError(f"Invalid comments for issue {data.get('key')}")
            comments = tuple(
                Comment.from_api_response(c) for c in comment_field["comments"]
            )

        return cls(
            id=str(data.get("id") or ""),
            key=str(data.get("key") or ""),
            summary=str(fields.get("summary") or ""),
            status=Status.from_api_response(fields.get("status")),
            issue_type=IssueType.from_api_response(fields.get("issuetype")),
            created=utils.parse_time(fields.get("created")),
            updated=utils.parse_time(fields.get("updated")),
            assignee=User.from_api_response(fields.get("assignee")),
            reporter=User.from_api_response(fields.get("reporter")),
            priority=Priority.from_api_response(fields.get("priority")),
            description=fields.get("description"),
            comments=comments,
        )


@dataclass(frozen=True)
class Board:
    id: int
    name: str
    type: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Board":
        try:
            return cls(
                id=int(data["id"]),
                name=str(data.get("name") or ""),
                type=str(data.get("type") or ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Invalid board payload: {data!r}") from e


@dataclass(frozen=True)
class Sprint:
    id: int
    name: str
    state: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Sprint":
        try:
            return cls(
                id=int(data["id"]),
                name=str(data.get("name") or ""),
                state=str(data.get("state") or ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Invalid sprint payload: {data!r}") from e


def parse_list(payload: Any, record, envelope: Optional[str] = None) -> List[Any]:
    """Map a JSON list (optionally wrapped in ``envelope``) to typed records."""
    if envelope is not None:
        if not isinstance(payload, dict):
            raise ParseError(
                f"Expected an object with '{envelope}', got {type(payload).__name__}"
            )
        payload = payload.get(envelope)
    if not isinstance(payload, list):
        raise ParseError(f"Expected a list, got {type(payload).__name__}")
    for item in payload:
        if not isinstance(item, dict):
            raise ParseError(
                f"Expected an object in {record.__name__} list, got {item!r}"
            )
    return [record.from_api_response(item) for item in payload]
