"""Exception hierarchy shared by the retrieval client and the query layer."""

from __future__ import annotations


class ShardSearchError(Exception):
    """Base class for every failure the CLI reports to the user."""


class FetchError(ShardSearchError):
    """Raised when a page cannot be retrieved."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class HTTPRequestError(FetchError):
    """The redirect chain ended on a non-2xx response."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        super().__init__(f"HTTP request failed: {status_code}", url)


class TooManyRedirectsError(FetchError):
    """The redirect budget ran out before the chain terminated."""

    def __init__(self, url: str = ""):
        super().__init__("Too many redirects", url)


class ShardNotFoundError(ShardSearchError):
    """A bare shard name or query produced no search results."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"No shard found with name '{name}'")
