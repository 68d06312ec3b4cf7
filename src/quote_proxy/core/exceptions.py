"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InsufficientDataError(AppError):
    """Raised when the provider returned fewer days than requested."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Requested {requested} days, only {available} days of data is available",
            code="INSUFFICIENT_DATA",
        )


class MalformedPriceError(AppError):
    """Raised when a day's closing price cannot be parsed."""

    def __init__(self, day: str, raw: object, reason: str):
        self.day = day
        self.raw = raw
        super().__init__(
            f"unable to parse {day} closing price {raw}: {reason}",
            code="MALFORMED_PRICE",
        )


class QuoteSerializationError(AppError):
    """Raised when a trimmed quote cannot be encoded as JSON."""

    status_code = 500

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__("unable to encode quote", code="INTERNAL_ERROR")


class UpstreamPermanentError(AppError):
    """Raised when the quote provider rejects the request in a way retrying cannot fix."""

    status_code = 502

    def __init__(self, upstream_status: int, reason: str = ""):
        self.upstream_status = upstream_status
        message = f"quote provider rejected the request ({upstream_status})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code="UPSTREAM_REJECTED")


class UpstreamUnavailableError(AppError):
    """Raised when the quote provider kept failing for every allowed attempt."""

    status_code = 503

    def __init__(self, attempts: int, last_status: int):
        self.attempts = attempts
        self.last_status = last_status
        super().__init__(
            f"quote provider unavailable after {attempts} attempts (last status {last_status})",
            code="UPSTREAM_UNAVAILABLE",
        )
