"""Search errors surfaced to callers as input problems, not system faults."""


class SearchError(ValueError):
    """Base class for rejected search requests."""


class EmptyQueryError(SearchError):
    """Raised when a query is empty or whitespace-only."""

    def __init__(self, message: str = "Query must not be empty"):
        super().__init__(message)


class InvalidSearchModeError(SearchError):
    """Raised when a search mode is not one of the supported modes."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(f"Unsupported search mode: {mode!r}")
