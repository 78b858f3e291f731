import pymupdf

from career_analysis.extraction.base import BaseDocumentParser
from career_analysis.extraction.exceptions import ExtractionError
from career_analysis.extraction.text import normalize_text

# Index of the word text inside the tuples returned by page.get_text("words").
_WORD_TEXT = 4


class PyMuPdfAdapter(BaseDocumentParser):
    """Extracts PDF text with PyMuPDF, one line per page."""

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    " ".join(word[_WORD_TEXT] for word in page.get_text("words"))
                    for page in doc
                ]
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return normalize_text("\n".join(pages))
