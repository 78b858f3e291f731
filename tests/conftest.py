import io

import docx
import pymupdf
import pytest
from PIL import Image

RESUME_TEXT = (
    "Senior Python developer with eight years of experience building data pipelines"
)


def make_pdf(pages: list[str]) -> bytes:
    """Build a PDF with one text line per page."""
    doc = pymupdf.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return make_pdf(["Hello PDF World"])


@pytest.fixture
def multi_page_pdf_bytes() -> bytes:
    return make_pdf(["Page one content", "Page two content"])


@pytest.fixture
def empty_pdf_bytes() -> bytes:
    return make_pdf([""])


@pytest.fixture
def resume_pdf_bytes() -> bytes:
    return make_pdf([RESUME_TEXT, "Skills: Python, SQL, Airflow"])


@pytest.fixture
def sample_docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("")
    document.add_paragraph("")
    document.add_paragraph("Data Engineer")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "SQL"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (20, 20), "white").save(buffer, format="PNG")
    return buffer.getvalue()
