"""Error types raised by the fetch, aggregate and export operations."""


class StarsError(Exception):
    """Base error. ``status`` is the HTTP-style status a caller should report."""

    kind = "Error"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Filled in by aggregate_all for diagnostics; never a partial result
        self.pages_fetched = 0
        self.collected: list = []

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidInputError(StarsError):
    """Local validation failed. Raised before any network call."""

    kind = "InvalidInput"
    status = 400


class RemoteError(StarsError):
    """GitHub answered with a non-success status."""

    kind = "RemoteError"

    def __init__(self, status: int, body: str):
        super().__init__(f"GitHub API error ({status}): {body}")
        self.status = status
        self.body = body


class NetworkFailure(StarsError):
    """Transport-level failure (DNS, timeout, connection reset)."""

    kind = "NetworkFailure"
    status = 502


class ExportError(StarsError):
    """The serialized export could not be written."""

    kind = "ExportError"
    status = 500
