from unittest.mock import patch

import pytest

from tikit.api.models import Issue


@pytest.fixture
def sample_config():
    """Return a sample configuration dictionary."""
    return {
        "jira_server": "https://test-jira.example.com",
        "jira_email": "tester@example.com",
        "jira_api_token": "secret-token",
        "jql": "assignee = currentUser() ORDER BY created DESC",
        "max_results": 100,
        "timeout": 20.0,
        "verbose": False,
        "quiet": True,
        "insecure": False,
        "filters": {},
    }


def make_issue_payload(
    key,
    summary="Test issue",
    status="To Do",
    issue_type="Task",
    assignee=None,
    reporter="Reporter User",
    priority="Medium",
    description="Some description",
    comments=None,
    created="2023-01-01T10:00:00.000+0000",
    updated="2023-01-02T11:30:00.000+0000",
):
    fields = {
        "summary": summary,
        "status": {"name": status},
        "issuetype": {"name": issue_type},
        "assignee": {"displayName": assignee} if assignee else None,
        "reporter": {"displayName": reporter} if reporter else None,
        "priority": {"name": priority} if priority else None,
        "description": description,
        "created": created,
        "updated": updated,
    }
    if comments is not None:
        fields["comment"] = {
            "comments": comments,
            "maxResults": len(comments),
            "total": len(comments),
            "startAt": 0,
        }
    return {"id": f"1{key.split('-')[-1]}", "key": key, "fields": fields}


def make_issue(key, **kwargs) -> Issue:
    return Issue.from_api_response(make_issue_payload(key, **kwargs))


@pytest.fixture
def sample_issue_payloads():
    """Return the raw issues of a Jira search response."""
    return {
        "issues": [
            make_issue_payload(
                "TEST-123",
                summary="Fix Login page",
                status="In Progress",
                issue_type="Bug",
                assignee="Test User",
                priority="High",
                comments=[
                    {
                        "author": {"displayName": "Test User"},
                        "body": "This is a test comment",
                        "created": "2023-01-02T10:00:00.000+0000",
                        "updated": "2023-01-02T10:00:00.000+0000",
                    }
                ],
            ),
            make_issue_payload(
                "TEST-124",
                summary="Write release notes",
                status="To Do",
                issue_type="Task",
                priority="Low",
                description=None,
            ),
            make_issue_payload(
                "TEST-125",
                summary="Login audit",
                status="Done",
                issue_type="Story",
                assignee="Jane",
            ),
        ],
        "total": 3,
    }


@pytest.fixture
def sample_issues(sample_issue_payloads):
    """Return the sample issues as typed records."""
    return [Issue.from_api_response(p) for p in sample_issue_payloads["issues"]]


@pytest.fixture
def mock_browser_open():
    """Mock the webbrowser.open function."""
    with patch("webbrowser.open") as mock_open:
        mock_open.return_value = True
        yield mock_open


@pytest.fixture
def mock_subprocess_run():
    """Mock the subprocess.run function."""
    with patch("subprocess.run") as mock_run:
        yield mock_run


@pytest.fixture(autouse=True)
def mock_prompt_ask(monkeypatch):
    from rich.prompt import Prompt

    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: "fakeinput")


@pytest.fixture
def issue_factory():
    """Return a factory building issues from a few field values."""
    return make_issue
