from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template by name from the bundled prompts directory.

    Args:
        name: Template name without suffix, e.g. ``resume_prompt``.
        path: Explicit template file; overrides ``name`` when given.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        FileNotFoundError: if the template does not exist.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}.txt"
    return path.read_text(encoding="utf-8")
