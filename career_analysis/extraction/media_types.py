PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
JPEG = "image/jpeg"
PNG = "image/png"

IMAGE_TYPES = frozenset({JPEG, PNG})


def is_pdf(media_type: str) -> bool:
    return media_type == PDF


def is_docx(media_type: str) -> bool:
    return media_type == DOCX


def is_image(media_type: str) -> bool:
    return media_type in IMAGE_TYPES


_SUFFIXES: dict[str, str] = {
    ".pdf": PDF,
    ".docx": DOCX,
    ".jpg": JPEG,
    ".jpeg": JPEG,
    ".png": PNG,
}


def guess_from_filename(filename: str) -> str:
    """Media type for a supported file suffix, or a generic binary type."""
    for suffix, media_type in _SUFFIXES.items():
        if filename.lower().endswith(suffix):
            return media_type
    return "application/octet-stream"
