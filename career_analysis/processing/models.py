from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedArtifact:
    """An uploaded file owned by exactly one pipeline run.

    ``path`` points at the stored copy that must be removed when the run ends;
    it is ``None`` for artifacts that were never written to storage.
    """

    content: bytes
    media_type: str
    filename: str
    size_bytes: int
    path: Path | None = None

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        media_type: str,
        filename: str,
        path: Path | None = None,
    ) -> "UploadedArtifact":
        return cls(
            content=content,
            media_type=media_type,
            filename=filename,
            size_bytes=len(content),
            path=path,
        )
