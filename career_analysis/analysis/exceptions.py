class AnalysisBackendError(Exception):
    """Raised when a single call to an analysis backend fails."""


class AnalysisRateLimitError(AnalysisBackendError):
    """Raised when a backend rejects the call with a rate-limit (HTTP 429) error."""


class AnalysisError(Exception):
    """Raised when every configured backend failed.

    ``attempts`` lists the models tried, in order. The last backend error is
    chained as ``__cause__``.
    """

    def __init__(self, message: str, attempts: list[str] | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts or []


class MalformedResponseError(Exception):
    """Raised when a backend completion is not a parseable JSON object."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw
