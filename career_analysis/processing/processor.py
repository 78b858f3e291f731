from career_analysis.analysis.factory import AnalysisClientFactory
from career_analysis.analysis.models import AnalysisResult, Variant
from career_analysis.analysis.normalizer import ResponseNormalizer
from career_analysis.analysis.prompt_builder import PromptBuilder
from career_analysis.config.settings import Settings
from career_analysis.database.repositories.analysis_repository import AnalysisRepository
from career_analysis.extraction.factory import TextExtractorFactory
from career_analysis.extraction.ocr import OcrProfile
from career_analysis.extraction.quality import QualityGate
from career_analysis.logging.logger import Log
from career_analysis.processing.cleanup import CleanupCoordinator
from career_analysis.processing.errors import document_label, error_payload
from career_analysis.processing.exceptions import RequestValidationError
from career_analysis.processing.models import UploadedArtifact
from career_analysis.processing.pipeline import PipelineContext, PipelineStep
from career_analysis.processing.steps import (
    BuildPromptStep,
    ExtractTextStep,
    NormalizeResponseStep,
    OcrFallbackStep,
    PersistAnalysisStep,
    QualityGateStep,
    SubmitAnalysisStep,
    ValidateUploadStep,
)
from career_analysis.processing.validation import UploadValidator


class AnalysisProcessor:
    """Runs one uploaded document through the analysis pipeline.

    Pipeline: validate -> extract -> OCR fallback -> quality gate -> prompt
    -> submit -> normalize -> persist. The uploaded artifact is deleted when
    the run ends, whether it succeeded or not.
    """

    def __init__(self, steps: list[PipelineStep], include_error_details: bool = False) -> None:
        self._steps = steps
        self._include_error_details = include_error_details

    def process(
        self,
        artifact: UploadedArtifact | None,
        job_description: str,
        variant: Variant,
        user_id: str | None = None,
    ) -> AnalysisResult:
        """Return the normalized analysis or raise the error that stopped the run."""
        if artifact is None:
            raise RequestValidationError("No file uploaded")

        context = PipelineContext(
            artifact=artifact,
            job_description=job_description,
            variant=variant,
            user_id=user_id,
        )
        with CleanupCoordinator.artifact_scope(artifact):
            try:
                for step in self._steps:
                    context = step.run(context)
            except Exception as exc:
                Log.error(f"Processing {document_label(variant)} failed: {exc}")
                raise

        if context.result is None:
            raise RuntimeError("Pipeline finished without an analysis result")
        return context.result

    def respond(
        self,
        artifact: UploadedArtifact | None,
        job_description: str,
        variant: Variant,
        user_id: str | None = None,
    ) -> tuple[int, dict[str, object]]:
        """Run the pipeline and return ``(status_code, json_body)`` for a request handler."""
        try:
            result = self.process(artifact, job_description, variant, user_id)
        except Exception as exc:
            status_code, body = error_payload(exc, variant, self._include_error_details)
            return status_code, dict(body)
        return 200, result.to_payload()


def build_ocr_profiles(settings: Settings) -> dict[Variant, OcrProfile]:
    return {
        Variant.RESUME: OcrProfile(
            languages=settings.ocr_default_languages,
            engine_mode=settings.ocr_engine_mode,
            page_mode=settings.ocr_default_page_mode,
        ),
        Variant.LINKEDIN_PROFILE: OcrProfile(
            languages=settings.ocr_profile_languages,
            engine_mode=settings.ocr_engine_mode,
            page_mode=settings.ocr_profile_page_mode,
        ),
    }


def build_processor(
    settings: Settings,
    repository: AnalysisRepository | None = None,
) -> AnalysisProcessor:
    """Build an AnalysisProcessor with all adapters configured from settings."""
    quality_gate = QualityGate(settings.min_text_length)
    extractor = TextExtractorFactory.create(settings)
    steps: list[PipelineStep] = [
        ValidateUploadStep(UploadValidator(settings.max_upload_bytes)),
        ExtractTextStep(extractor),
        OcrFallbackStep(extractor, quality_gate, build_ocr_profiles(settings)),
        QualityGateStep(quality_gate),
        BuildPromptStep(PromptBuilder()),
        SubmitAnalysisStep(AnalysisClientFactory.create(settings)),
        NormalizeResponseStep(ResponseNormalizer()),
    ]
    if repository is None and settings.persist_results:
        repository = AnalysisRepository()
    if repository is not None:
        steps.append(PersistAnalysisStep(repository))
    return AnalysisProcessor(steps, include_error_details=settings.app_env == "dev")
