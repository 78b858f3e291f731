class QualityGate:
    """Decides whether extracted text is long enough to be analyzed."""

    DEFAULT_MIN_LENGTH = 50

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        self._min_length = min_length

    @property
    def min_length(self) -> int:
        return self._min_length

    def is_meaningful(self, text: str) -> bool:
        return bool(text) and len(text) >= self._min_length
