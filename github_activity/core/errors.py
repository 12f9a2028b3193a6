"""
Failures raised by the collaborators around the formatting core.

The core itself never raises: every one of these is detected at the boundary
(CLI arguments, HTTP response, JSON body) and is terminal for the invocation.
"""

from typing import Optional


class GitHubActivityError(Exception):
    """Base class for every user-visible failure of the CLI."""


class UsageError(GitHubActivityError):
    def __init__(self, message: str = "Please provide a GitHub username."):
        super().__init__(message)


class NotFoundError(GitHubActivityError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f'User "{username}" not found.')


class RateLimitError(GitHubActivityError):
    def __init__(self, reset_at: Optional[str] = None):
        self.reset_at = reset_at
        super().__init__("API rate limit exceeded. Please try again later.")


class UnexpectedStatusError(GitHubActivityError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Failed to fetch data (Status Code: {status_code})")


class FormatError(GitHubActivityError):
    def __init__(self, message: str = "Received unexpected data format from GitHub."):
        super().__init__(message)


class TransportError(GitHubActivityError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network Error: {detail}")
