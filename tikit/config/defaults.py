"""Default configuration values and constants for tikit."""

import pathlib

JQL = "assignee = currentUser() ORDER BY created DESC"

API_PATH = "/rest/api/2"
AGILE_API_PATH = "/rest/agile/1.0"

FIELDS = [
    "summary",
    "status",
    "issuetype",
    "assignee",
    "reporter",
    "priority",
    "description",
    "created",
    "updated",
    "comment",
]

MAX_RESULTS = 100

# Seconds before a single request is abandoned
REQUEST_TIMEOUT = 20

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DISPLAY_DATE_FORMAT = "%Y-%m-%d"

FILTER_KEYS = ("status", "issueType", "assignee")
UNASSIGNED = "Unassigned"

SUMMARY_MAX_LENGTH = 80
BRANCH_PREFIX = "feature"
BRANCH_SUMMARY_MAX_LENGTH = 60

DEFAULT_COLOR = "white"

STATUS_COLORS = {
    "to do": "red",
    "in progress": "blue",
    "done": "green",
    "selected for development": "purple",
    "in testing": "yellow",
    "ready for test": "yellow",
}

ISSUE_TYPE_COLORS = {
    "bug": "red",
    "story": "green",
    "task": "blue",
    "epic": "dark_orange",
}

PRIORITY_COLORS = {
    "highest": "red",
    "high": "dark_orange",
    "medium": "yellow",
    "low": "blue",
    "lowest": "grey50",
}

LOG_LEVELS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "SUCCESS": "blue",
}

CONFIG_FILE = pathlib.Path.home() / ".config" / "tikit" / "config.yaml"
