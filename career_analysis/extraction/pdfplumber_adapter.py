import io

import pdfplumber

from career_analysis.extraction.base import BaseDocumentParser
from career_analysis.extraction.exceptions import ExtractionError
from career_analysis.extraction.text import normalize_text


class PdfPlumberAdapter(BaseDocumentParser):
    """Extracts PDF text with pdfplumber, one line per page."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [
                    " ".join(word["text"] for word in page.extract_words())
                    for page in pdf.pages
                ]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return normalize_text("\n".join(pages))
