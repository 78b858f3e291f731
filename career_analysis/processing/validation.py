from career_analysis.analysis.models import Variant
from career_analysis.extraction import media_types
from career_analysis.processing.exceptions import RequestValidationError
from career_analysis.processing.models import UploadedArtifact

ALLOWED_MEDIA_TYPES: dict[Variant, frozenset[str]] = {
    Variant.RESUME: frozenset(
        {media_types.PDF, media_types.DOCX, media_types.JPEG, media_types.PNG}
    ),
    Variant.LINKEDIN_PROFILE: frozenset({media_types.PDF}),
}

_MEDIA_TYPE_MESSAGES: dict[Variant, str] = {
    Variant.RESUME: "Only PDF, DOCX, JPG, and PNG files are allowed",
    Variant.LINKEDIN_PROFILE: "Only PDF files are allowed for LinkedIn analysis",
}


class UploadValidator:
    """Rejects uploads the pipeline must not process."""

    def __init__(self, max_upload_bytes: int = 2 * 1024 * 1024) -> None:
        self._max_upload_bytes = max_upload_bytes

    def validate(
        self,
        artifact: UploadedArtifact,
        job_description: str,
        variant: Variant,
    ) -> None:
        """Raise RequestValidationError for the first rule the request breaks."""
        if artifact.size_bytes == 0:
            raise RequestValidationError("No file uploaded")
        if artifact.size_bytes > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes / (1024 * 1024)
            raise RequestValidationError(f"File exceeds the {limit_mb:g}MB upload limit")
        if artifact.media_type not in ALLOWED_MEDIA_TYPES[variant]:
            raise RequestValidationError(_MEDIA_TYPE_MESSAGES[variant])
        if not job_description or not job_description.strip():
            raise RequestValidationError("Job description is required")
