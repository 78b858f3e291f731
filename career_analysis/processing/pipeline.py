from abc import ABC, abstractmethod
from dataclasses import dataclass

from career_analysis.analysis.models import AnalysisRequest, AnalysisResult, Variant
from career_analysis.processing.models import UploadedArtifact


@dataclass(slots=True)
class PipelineContext:
    artifact: UploadedArtifact
    job_description: str
    variant: Variant
    user_id: str | None = None
    extracted_text: str = ""
    extraction_method: str = ""
    request: AnalysisRequest | None = None
    prompt: str = ""
    raw_completion: str = ""
    result: AnalysisResult | None = None
    record_id: int | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
