"""Guaranteed, best-effort removal of request-scoped files."""

import shutil
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from career_analysis.logging.logger import Log
from career_analysis.processing.models import UploadedArtifact


class CleanupCoordinator:
    """Owns deletion of uploaded artifacts and OCR scratch directories.

    Every helper logs deletion failures instead of raising them, so cleanup
    never masks the error that ended the pipeline run.
    """

    @staticmethod
    def remove_file(path: Path) -> bool:
        """Delete a file if it exists. Returns False when deletion failed."""
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Error cleaning up file {path}: {exc}")
            return False
        return True

    @staticmethod
    def remove_directory(path: Path) -> bool:
        """Delete a directory tree if it exists. Returns False when deletion failed."""
        if not path.exists():
            return True
        try:
            shutil.rmtree(path)
        except OSError as exc:
            Log.warning(f"Error cleaning up directory {path}: {exc}")
            return False
        return True

    @classmethod
    @contextmanager
    def artifact_scope(cls, artifact: UploadedArtifact) -> Iterator[UploadedArtifact]:
        """Yield the artifact and delete its stored copy on every exit path."""
        try:
            yield artifact
        finally:
            if artifact.path is not None:
                cls.remove_file(artifact.path)
                Log.debug(f"Removed uploaded artifact {artifact.path}")

    @classmethod
    @contextmanager
    def scratch_directory(cls, root: Path, prefix: str = "ocr") -> Iterator[Path]:
        """Create a directory unique to this invocation and remove it afterwards."""
        root.mkdir(parents=True, exist_ok=True)
        path = Path(
            tempfile.mkdtemp(prefix=f"{prefix}-{time.time_ns()}-", dir=root)
        )
        try:
            yield path
        finally:
            cls.remove_directory(path)
