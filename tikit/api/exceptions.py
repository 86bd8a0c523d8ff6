"""Custom exception classes for tikit."""


class TikitError(Exception):
    """Base exception for all tikit errors."""


class TransportError(TikitError):
    """Network or connection failure while talking to Jira."""


class RequestTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""

    def __init__(self, endpoint: str, timeout: float):
        self.endpoint = endpoint
        self.timeout = timeout
        super().__init__(f"Request to {endpoint} timed out after {timeout:g}s")


class ParseError(TikitError):
    """Malformed JSON payload, response envelope or timestamp."""


class RemoteStatusError(TikitError):
    """Base exception for non-success Jira API responses."""

    def __init__(
        self, message: str, endpoint: str, status_code: int, response_body: str
    ):
        self.endpoint = endpoint
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    def __str__(self):
        return (
            f"{super().__str__()}\n"
            f"Endpoint: {self.endpoint}\n"
            f"Status: {self.status_code}\n"
            f"Response: {self.response_body}"
        )


class JiraRateLimitError(RemoteStatusError):
    """Exception raised when Jira rate limit (429) is exceeded."""

    def __init__(self, endpoint: str, response_body: str):
        super().__init__(
            "Rate limit exceeded. Please wait before making more requests.",
            endpoint,
            429,
            response_body,
        )


class JiraNotFoundError(RemoteStatusError):
    """Exception raised when Jira resource is not found (404)."""

    def __init__(self, endpoint: str, response_body: str):
        super().__init__(
            "Resource not found. Check the server URL and endpoint.",
            endpoint,
            404,
            response_body,
        )


class JiraAuthenticationError(RemoteStatusError):
    """Exception raised when authentication fails (401)."""

    def __init__(self, endpoint: str, response_body: str):
        super().__init__(
            "Authentication failed. Check JIRA_EMAIL and JIRA_API_TOKEN.",
            endpoint,
            401,
            response_body,
        )


class JiraAuthorizationError(RemoteStatusError):
    """Exception raised when authorization fails (403)."""

    def __init__(self, endpoint: str, response_body: str):
        super().__init__(
            "Access forbidden. You don't have permission to access this resource.",
            endpoint,
            403,
            response_body,
        )


def remote_status_error(
    endpoint: str, status_code: int, response_body: str
) -> RemoteStatusError:
    """Build the most specific error for a non-success status code."""
    specific = {
        401: JiraAuthenticationError,
        403: JiraAuthorizationError,
        404: JiraNotFoundError,
        429: JiraRateLimitError,
    }
    if status_code in specific:
        return specific[status_code](endpoint, response_body)
    return RemoteStatusError(
        f"Jira API returned non-OK status: {status_code}",
        endpoint,
        status_code,
        response_body,
    )


class InvalidSelection(TikitError):
    """Selection index is outside the displayed issue set."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid issue selection: {index} (displaying {size})")


class SideEffectError(TikitError):
    """Opening a browser or writing to the clipboard failed."""


class FetchInProgressError(TikitError):
    """A fetch was requested while one is already running or done."""
