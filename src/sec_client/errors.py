"""Exceptions raised by the SEC EDGAR client.

Every endpoint call either returns a typed value or raises one of these.
Nothing is retried automatically; callers decide on backoff using
``is_transient()`` and, for rate limiting, ``RateLimitExceeded.retry_after``.
"""


class EdgarError(Exception):
    """Base class for every error raised by this package."""

    def is_transient(self) -> bool:
        """Whether the same request may succeed if retried later."""
        return False

    def is_rate_limited(self) -> bool:
        return False


class NetworkError(EdgarError):
    """Connection, timeout, TLS or DNS failure below the HTTP layer."""

    def __init__(self, message):
        super().__init__(f"Network error: {message}")

    def is_transient(self) -> bool:
        return True


class ParseError(EdgarError):
    """A response body that is not the JSON shape the endpoint promises."""

    def __init__(self, message):
        super().__init__(f"Parse error: {message}")


class RowShapeError(ParseError):
    """A tabular row with the wrong number or type of columns."""


class RequestError(EdgarError):
    """The request could not be formed or its result could not be stored locally."""

    def __init__(self, message):
        super().__init__(f"Request error: {message}")


class ApiError(EdgarError):
    """The SEC answered with a non-success status."""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"API error {status}: {message}")

    def is_transient(self) -> bool:
        return self.status == 429 or self.status == 503 or self.status >= 500

    def is_rate_limited(self) -> bool:
        return self.status == 429


class RateLimitExceeded(EdgarError):
    """HTTP 429 from the SEC; ``retry_after`` is in seconds when the server sent one."""

    def __init__(self, retry_after: int | None = None):
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. Please wait {retry_after} seconds before retrying."
            if retry_after is not None
            else "Rate limit exceeded. Please wait before retrying."
        )

    def is_transient(self) -> bool:
        return True

    def is_rate_limited(self) -> bool:
        return True


class InvalidCikError(EdgarError, ValueError):
    """A CIK that cannot be normalised to 10 digits."""

    def __init__(self, cik, reason: str):
        self.cik = cik
        self.reason = reason
        super().__init__(f"Invalid CIK format: {cik!r} ({reason})")


class EdgarIOError(EdgarError):
    """Filesystem failure while writing extracted archive entries."""

    def __init__(self, message):
        super().__init__(f"I/O error: {message}")


class ZipError(EdgarError):
    """An archive that cannot be read or contains an unsafe entry."""

    def __init__(self, message):
        super().__init__(f"Zip extraction error: {message}")
