from pathlib import Path

from career_analysis.config.settings import Settings
from career_analysis.extraction.base import BaseDocumentParser
from career_analysis.extraction.docx_adapter import DocxAdapter
from career_analysis.extraction.extractor import TextExtractor
from career_analysis.extraction.ocr import OcrEngine
from career_analysis.extraction.pdfplumber_adapter import PdfPlumberAdapter
from career_analysis.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Builds a TextExtractor with the parsers and OCR engine chosen by settings."""

    PDF_PARSERS: dict[str, type[BaseDocumentParser]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            pdf_parser=cls.create_pdf_parser(settings),
            docx_parser=DocxAdapter(),
            ocr_engine=cls.create_ocr_engine(settings),
        )

    @classmethod
    def create_pdf_parser(cls, settings: Settings) -> BaseDocumentParser:
        engine = settings.pdf_engine.lower()
        parser_cls = cls.PDF_PARSERS.get(engine)
        if parser_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.PDF_PARSERS)}"
            )
        return parser_cls()

    @staticmethod
    def create_ocr_engine(settings: Settings) -> OcrEngine:
        return OcrEngine(
            scratch_root=Path(settings.scratch_root),
            dpi=settings.ocr_dpi,
            max_workers=settings.ocr_max_workers,
            tesseract_cmd=settings.tesseract_cmd,
        )
