from career_analysis.extraction import media_types
from career_analysis.extraction.base import BaseDocumentParser
from career_analysis.extraction.exceptions import ExtractionError
from career_analysis.extraction.ocr import OcrEngine, OcrProfile
from career_analysis.logging.logger import Log
from career_analysis.processing.models import UploadedArtifact


class TextExtractor:
    """Routes an uploaded artifact to the parser that fits its media type.

    ``extract`` never raises on a malformed document: an empty string tells
    the caller to try ``extract_with_ocr`` instead.
    """

    def __init__(
        self,
        *,
        pdf_parser: BaseDocumentParser,
        docx_parser: BaseDocumentParser,
        ocr_engine: OcrEngine,
    ) -> None:
        self._pdf_parser = pdf_parser
        self._docx_parser = docx_parser
        self._ocr_engine = ocr_engine

    def extract(self, artifact: UploadedArtifact) -> str:
        parser = self._parser_for(artifact.media_type)
        if parser is None:
            Log.info(f"No document parser for {artifact.media_type}, deferring to OCR")
            return ""
        try:
            return parser.extract(artifact.content)
        except ExtractionError as exc:
            Log.warning(f"Parsing {artifact.filename} failed: {exc}")
            return ""

    def extract_with_ocr(self, artifact: UploadedArtifact, profile: OcrProfile) -> str:
        return self._ocr_engine.recognize(artifact, profile)

    def _parser_for(self, media_type: str) -> BaseDocumentParser | None:
        if media_types.is_pdf(media_type):
            return self._pdf_parser
        if media_types.is_docx(media_type):
            return self._docx_parser
        return None
