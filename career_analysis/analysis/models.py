from dataclasses import dataclass, field
from enum import Enum


class Variant(str, Enum):
    """Analysis flavor: selects the prompt template and optional fields."""

    RESUME = "resume"
    LINKEDIN_PROFILE = "linkedin-profile"


@dataclass(frozen=True)
class AnalysisRequest:
    """Input for one analysis: extracted document text against a job description."""

    document_text: str
    job_description: str
    variant: Variant


@dataclass(frozen=True)
class AnalysisResult:
    """Normalized match analysis. Every required field is always populated."""

    match_score: int = 0
    strengths: list[str] = field(default_factory=list)
    gaps: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    optimized_section: str = ""
    before_after_comparison: str = ""
    keyword_match_score: int = 0
    profile_completeness: int | None = None

    def to_payload(self) -> dict[str, object]:
        """Render the storable JSON shape (camelCase keys)."""
        payload: dict[str, object] = {
            "matchScore": self.match_score,
            "strengths": list(self.strengths),
            "gaps": list(self.gaps),
            "improvements": list(self.improvements),
            "optimizedSection": self.optimized_section,
            "beforeAfterComparison": self.before_after_comparison,
            "keywordMatchScore": self.keyword_match_score,
        }
        if self.profile_completeness is not None:
            payload["profileCompleteness"] = self.profile_completeness
        return payload


@dataclass(frozen=True)
class ValidResponse:
    """Completion that parsed into a JSON object."""

    data: dict[str, object]


@dataclass(frozen=True)
class MalformedResponse:
    """Completion that could not be read as a JSON object."""

    raw: str
    reason: str


ParsedResponse = ValidResponse | MalformedResponse
