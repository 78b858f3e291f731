import io

import docx

from career_analysis.extraction.base import BaseDocumentParser
from career_analysis.extraction.exceptions import ExtractionError
from career_analysis.extraction.text import normalize_text


class DocxAdapter(BaseDocumentParser):
    """Extracts raw text from a Word document's paragraphs and tables."""

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    lines.append(" ".join(cell.text for cell in row.cells))
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        return normalize_text("\n".join(lines))
