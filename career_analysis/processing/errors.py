from career_analysis.analysis.models import Variant
from career_analysis.processing.exceptions import PipelineError

_DOCUMENT_LABELS: dict[Variant, str] = {
    Variant.RESUME: "resume",
    Variant.LINKEDIN_PROFILE: "LinkedIn PDF",
}


def document_label(variant: Variant) -> str:
    return _DOCUMENT_LABELS[variant]


def error_payload(
    exc: Exception,
    variant: Variant,
    include_details: bool = False,
) -> tuple[int, dict[str, str]]:
    """Map a pipeline failure to ``(status_code, {"error": ..., "details": ...})``.

    Validation and quality-gate failures keep their own message and 400 status.
    Anything else, backend exhaustion and malformed responses included, is a
    500 with a generic message; the technical detail is attached only when
    ``include_details`` is set.
    """
    if isinstance(exc, PipelineError):
        status_code = exc.status_code
        body = {"error": exc.message}
        details = exc.details
    else:
        status_code = 500
        body = {"error": f"Unexpected error during {document_label(variant)} processing"}
        details = str(exc)
    if include_details and details:
        body["details"] = details
    return status_code, body
