"""Optical character recognition fallback.

PDF sources are rasterized page by page with PyMuPDF into a request-scoped
scratch directory, each page image is recognized by tesseract on a bounded
worker pool, and the page texts are joined in page order. Images are
recognized directly. The scratch directory is removed whatever happens.
"""

import io
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

import pymupdf
import pytesseract
from PIL import Image

from career_analysis.extraction import media_types
from career_analysis.extraction.exceptions import OcrError
from career_analysis.extraction.text import normalize_text
from career_analysis.logging.logger import Log
from career_analysis.processing.cleanup import CleanupCoordinator
from career_analysis.processing.models import UploadedArtifact


@dataclass(frozen=True)
class OcrProfile:
    """Tesseract language set and layout assumptions for one document kind."""

    languages: str = "eng"
    engine_mode: int = 3
    page_mode: int = 3

    @property
    def tesseract_config(self) -> str:
        return f"--oem {self.engine_mode} --psm {self.page_mode}"


class OcrEngine:
    """Recognizes text in scanned PDFs and images. Never raises on bad input."""

    def __init__(
        self,
        *,
        scratch_root: Path,
        dpi: int = 300,
        max_workers: int = 4,
        tesseract_cmd: str = "",
    ) -> None:
        self._scratch_root = scratch_root
        self._dpi = dpi
        self._max_workers = max(1, max_workers)
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, artifact: UploadedArtifact, profile: OcrProfile) -> str:
        """Return recognized text, or an empty string if OCR is impossible."""
        try:
            if media_types.is_pdf(artifact.media_type):
                return self._recognize_pdf(artifact.content, profile)
            if media_types.is_image(artifact.media_type):
                return self._recognize_image(artifact.content, profile)
        except OcrError as exc:
            Log.warning(f"OCR failed for {artifact.filename}: {exc}")
            return ""
        Log.info(f"OCR is not supported for {artifact.media_type}")
        return ""

    def _recognize_pdf(self, content: bytes, profile: OcrProfile) -> str:
        with CleanupCoordinator.scratch_directory(self._scratch_root) as scratch:
            pages = self._rasterize(content, scratch)
            Log.info(f"Rasterized {len(pages)} pages at {self._dpi} DPI for OCR")
            texts = self._recognize_pages(pages, profile)
        return normalize_text("\n".join(texts))

    def _recognize_image(self, content: bytes, profile: OcrProfile) -> str:
        try:
            with Image.open(io.BytesIO(content)) as image:
                text = pytesseract.image_to_string(
                    image,
                    lang=profile.languages,
                    config=profile.tesseract_config,
                )
        except (OSError, pytesseract.TesseractError) as exc:
            raise OcrError(f"image recognition failed: {exc}") from exc
        return normalize_text(text)

    def _rasterize(self, content: bytes, scratch: Path) -> list[Path]:
        pages: list[Path] = []
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                for number, page in enumerate(doc, start=1):
                    path = scratch / f"page-{number}.png"
                    page.get_pixmap(dpi=self._dpi).save(str(path))
                    pages.append(path)
        except Exception as exc:
            raise OcrError(f"PDF to image conversion failed: {exc}") from exc
        return pages

    def _recognize_pages(self, pages: list[Path], profile: OcrProfile) -> list[str]:
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [pool.submit(self._recognize_page, page, profile) for page in pages]
            return [future.result() for future in futures]

    @staticmethod
    def _recognize_page(path: Path, profile: OcrProfile) -> str:
        try:
            return pytesseract.image_to_string(
                str(path),
                lang=profile.languages,
                config=profile.tesseract_config,
            )
        except (OSError, pytesseract.TesseractError) as exc:
            # A failed page contributes no text.
            Log.warning(f"OCR failed for {path.name}: {exc}")
            return ""
        finally:
            CleanupCoordinator.remove_file(path)
