"""Tests for the typed Jira records."""

import datetime

import pytest

from tikit.api.exceptions import ParseError
from tikit.api.models import (
    Board,
    Issue,
    Priority,
    Sprint,
    Status,
    User,
    parse_list,
)


def test_issue_from_search_payload(sample_issue_payloads):
    """An issue carries its fields, people and comments."""
    issue = Issue.from_api_response(sample_issue_payloads["issues"][0])

    assert issue.key == "TEST-123"
    assert issue.summary == "Fix Login page"
    assert issue.status.name == "In Progress"
    assert issue.issue_type.name == "Bug"
    assert issue.assignee.display_name == "Test User"
    assert issue.reporter.display_name == "Reporter User"
    assert issue.priority.name == "High"
    assert issue.description == "Some description"
    assert issue.created == datetime.datetime(
        2023, 1, 1, 10, 0, tzinfo=datetime.timezone.utc
    )
    assert len(issue.comments) == 1
    assert issue.comments[0].author.display_name == "Test User"
    assert issue.comments[0].body == "This is a test comment"


def test_issue_absent_fields(sample_issue_payloads):
    """Missing assignee, description and comment field stay absent."""
    issue = Issue.from_api_response(sample_issue_payloads["issues"][1])

    assert issue.assignee is None
    assert issue.description is None
    assert issue.comments is None


def test_issue_is_immutable(issue_factory):
    issue = issue_factory("ABC-1")
    with pytest.raises(AttributeError):
        issue.summary = "changed"  # type: ignore[misc]


def test_issue_rejects_bad_timestamp(issue_factory):
    with pytest.raises(ParseError):
        issue_factory("ABC-1", created="yesterday")


def test_issue_rejects_non_object():
    with pytest.raises(ParseError):
        Issue.from_api_response(["not", "an", "issue"])  # type: ignore[arg-type]


def test_user_and_priority_from_none():
    assert User.from_api_response(None) is None
    assert Priority.from_api_response(None) is None


def test_user_fields():
    user = User.from_api_response(
        {"displayName": "Jane", "emailAddress": "jane@example.com", "accountId": "42"}
    )
    assert user == User("Jane", "jane@example.com", "42")


def test_parse_list_with_envelope():
    """Board and sprint listings come wrapped in a ``values`` object."""
    boards = parse_list(
        {"values": [{"id": 1, "name": "Team board", "type": "scrum"}]},
        Board,
        envelope="values",
    )
    assert boards == [Board(1, "Team board", "scrum")]

    sprints = parse_list(
        {"values": [{"id": "7", "name": "Sprint 7", "state": "active"}]},
        Sprint,
        envelope="values",
    )
    assert sprints == [Sprint(7, "Sprint 7", "active")]


def test_parse_list_bare():
    statuses = parse_list([{"name": "To Do"}, {"name": "Done"}], Status)
    assert [s.name for s in statuses] == ["To Do", "Done"]


def test_parse_list_bad_envelope():
    with pytest.raises(ParseError):
        parse_list([], Issue, envelope="issues")
    with pytest.raises(ParseError):
        parse_list({"issues": "nope"}, Issue, envelope="issues")


def test_board_without_id():
    with pytest.raises(ParseError):
        Board.from_api_response({"name": "No id"})


@pytest.mark.parametrize("comments", [5, "text", {"0": "x"}])
def test_issue_rejects_malformed_comments(comments):
    payload = {
        "id": "1",
        "key": "ABC-1",
        "fields": {
            "summary": "x",
            "created": "2023-01-01T10:00:00.000+0000",
            "updated": "2023-01-01T10:00:00.000+0000",
            "comment": {"comments": comments},
        },
    }
    with pytest.raises(ParseError, match="ABC-1"):
        Issue.from_api_response(payload)


def test_parse_list_rejects_non_object_items():
    with pytest.raises(ParseError):
        parse_list([{"displayName": "Jane"}, None], User)
    with pytest.raises(ParseError):
        parse_list({"values": ["board"]}, Board, envelope="values")
