class PipelineError(Exception):
    """Base exception for failures reported to the caller with a status code."""

    status_code: int = 500

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class RequestValidationError(PipelineError):
    """Raised when an upload or request parameter is rejected before processing."""

    status_code = 400


class QualityGateFailure(PipelineError):
    """Raised when no extraction strategy produced meaningful text."""

    status_code = 400
