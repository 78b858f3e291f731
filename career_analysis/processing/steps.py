from career_analysis.analysis.client import AnalysisClient
from career_analysis.analysis.models import AnalysisRequest, Variant
from career_analysis.analysis.normalizer import ResponseNormalizer
from career_analysis.analysis.prompt_builder import PromptBuilder
from career_analysis.database.repositories.analysis_repository import AnalysisRepository
from career_analysis.extraction.extractor import TextExtractor
from career_analysis.extraction.ocr import OcrProfile
from career_analysis.extraction.quality import QualityGate
from career_analysis.logging.logger import Log
from career_analysis.processing.errors import document_label
from career_analysis.processing.exceptions import QualityGateFailure
from career_analysis.processing.pipeline import PipelineContext, PipelineStep
from career_analysis.processing.validation import UploadValidator


class ValidateUploadStep(PipelineStep):
    def __init__(self, validator: UploadValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        self._validator.validate(context.artifact, context.job_description, context.variant)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._extractor.extract(context.artifact)
        context.extraction_method = "parser"
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.artifact.filename}"
        )
        return context


class OcrFallbackStep(PipelineStep):
    """Runs OCR once when the parser's output does not pass the quality gate."""

    def __init__(
        self,
        extractor: TextExtractor,
        quality_gate: QualityGate,
        profiles: dict[Variant, OcrProfile],
    ) -> None:
        self._extractor = extractor
        self._quality_gate = quality_gate
        self._profiles = profiles

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._quality_gate.is_meaningful(context.extracted_text):
            return context
        Log.info(
            f"Insufficient text extracted from {context.artifact.filename}, "
            "falling back to OCR"
        )
        context.extracted_text = self._extractor.extract_with_ocr(
            context.artifact, self._profiles[context.variant]
        )
        context.extraction_method = "ocr"
        Log.info(f"OCR produced {len(context.extracted_text)} chars")
        return context


class QualityGateStep(PipelineStep):
    def __init__(self, quality_gate: QualityGate) -> None:
        self._quality_gate = quality_gate

    def run(self, context: PipelineContext) -> PipelineContext:
        if not self._quality_gate.is_meaningful(context.extracted_text):
            raise QualityGateFailure(
                f"Failed to extract meaningful text from {document_label(context.variant)}",
                details=(
                    f"{len(context.extracted_text)} chars extracted, "
                    f"at least {self._quality_gate.min_length} required"
                ),
            )
        return context


class BuildPromptStep(PipelineStep):
    def __init__(self, prompt_builder: PromptBuilder) -> None:
        self._prompt_builder = prompt_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        context.request = AnalysisRequest(
            document_text=context.extracted_text,
            job_description=context.job_description,
            variant=context.variant,
        )
        context.prompt = self._prompt_builder.build_for(context.request)
        Log.debug(f"Analysis prompt:\n{context.prompt}")
        return context


class SubmitAnalysisStep(PipelineStep):
    def __init__(self, client: AnalysisClient) -> None:
        self._client = client

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_completion = self._client.submit(context.prompt)
        Log.debug(f"Raw analysis response:\n{context.raw_completion}")
        return context


class NormalizeResponseStep(PipelineStep):
    def __init__(self, normalizer: ResponseNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.result = self._normalizer.normalize(context.raw_completion, context.variant)
        return context


class PersistAnalysisStep(PipelineStep):
    def __init__(self, repository: AnalysisRepository) -> None:
        self._repository = repository

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None:
            raise ValueError("PipelineContext.result must be set before persist")
        if context.user_id is None:
            Log.debug("No user id on request, analysis not persisted")
            return context
        context.record_id = self._repository.save(
            context.user_id,
            context.variant,
            context.job_description,
            context.result,
        )
        Log.info(f"Saved {context.variant.value} analysis {context.record_id}")
        return context
