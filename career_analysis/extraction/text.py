import re

_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def normalize_text(text: str) -> str:
    """Collapse runs of blank lines into a single newline and trim."""
    return _BLANK_LINES_RE.sub("\n", text).strip()
