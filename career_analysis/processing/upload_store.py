import uuid
from pathlib import Path

from career_analysis.processing.models import UploadedArtifact


class UploadStore:
    """Stores incoming uploads under unique names for one pipeline run."""

    UPLOAD_DIR = Path("uploads")

    def __init__(self, upload_dir: Path | None = None) -> None:
        self._upload_dir = upload_dir if upload_dir is not None else self.UPLOAD_DIR

    def save(self, content: bytes, media_type: str, filename: str) -> UploadedArtifact:
        """Write the upload to disk and return the artifact that owns it."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / f"{uuid.uuid4().hex}{Path(filename).suffix.lower()}"
        path.write_bytes(content)
        return UploadedArtifact.from_bytes(content, media_type, filename, path=path)
