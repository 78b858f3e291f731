class ExtractionError(Exception):
    """Raised when a document parser cannot produce text."""


class OcrError(ExtractionError):
    """Raised when rasterization or character recognition fails."""
