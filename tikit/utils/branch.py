"""Git branch name generation from issues."""

from tikit.config import defaults

REPLACEMENTS = {
    "&": "and",
    "@": "at",
}
REMOVED_CHARS = "!\"'?,.:;()[]{}"


def sanitize_summary(summary: str) -> str:
    sanitized = summary.lower().replace(" ", "-")
    for old, new in REPLACEMENTS.items():
        sanitized = sanitized.replace(old, new)
    sanitized = sanitized.translate(str.maketrans("", "", REMOVED_CHARS))
    if len(sanitized) > defaults.BRANCH_SUMMARY_MAX_LENGTH:
        sanitized = sanitized[: defaults.BRANCH_SUMMARY_MAX_LENGTH].rstrip("-")
    return sanitized


def generate_branch_name(issue) -> str:
    """Return ``feature/<KEY>-<sanitized summary>`` for an issue."""
    return f"{defaults.BRANCH_PREFIX}/{issue.key}-{sanitize_summary(issue.summary)}"
