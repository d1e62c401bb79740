"""Failure types raised by the cat sources and the record store."""


class CatFetchError(Exception):
    """Base class for catfetch failures."""


class RemoteError(CatFetchError):
    """A remote source answered with a non-success status or the request failed in transit.

    Attributes:
        status_code: HTTP status code, None when no response was received.
        category: 'rate_limited', 'server_error', 'client_error', 'timeout',
            'transport' or 'empty_payload'.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        category: str = "transport",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.category = category


class FetchCancelledError(CatFetchError):
    """The in-flight request was aborted before it completed."""


class PersistenceError(CatFetchError):
    """Writing a record to storage failed after it was added to history."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
