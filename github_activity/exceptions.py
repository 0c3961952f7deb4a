"""
Exceptions Module

Errors raised while fetching, decoding and summarizing GitHub events.
"""
from typing import Optional


class GitHubActivityError(Exception):
    """Base exception for github-activity errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(GitHubActivityError):
    """The request could not be sent or no response arrived."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class HTTPStatusError(GitHubActivityError):
    """The API answered with something other than 200 OK."""

    def __init__(self, status_code: int, reason: str = "", url: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        self.url = url
        super().__init__(f"non-OK status code: {self.status}")

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class DecodeError(GitHubActivityError):
    """The response body is not a JSON array of events."""


class RenderError(GitHubActivityError):
    """A known event type arrived without the payload its summary needs."""

    def __init__(self, event_type: str, repo_name: str, reason: str):
        self.event_type = event_type
        self.repo_name = repo_name
        super().__init__(f"cannot summarize {event_type} in {repo_name}: {reason}")
