from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class AnalysisRecord:
    """Represents a row from the resume_analyses or linkedin_analyses table."""

    id: int
    user_id: str
    job_description: str
    analysis: dict[str, Any]
    created_at: datetime | None = None
