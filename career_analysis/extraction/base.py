from abc import ABC, abstractmethod


class BaseDocumentParser(ABC):
    """Contract for structured-document text parsers."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text, normalized with ``normalize_text``.

        Raises:
            ExtractionError: if the document cannot be parsed.
        """
