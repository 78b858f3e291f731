from career_analysis.analysis.client import AnalysisClient
from career_analysis.analysis.factory import AnalysisClientFactory
from career_analysis.analysis.models import AnalysisRequest, AnalysisResult, Variant
from career_analysis.analysis.normalizer import ResponseNormalizer
from career_analysis.analysis.prompt_builder import PromptBuilder

__all__ = [
    "AnalysisClient",
    "AnalysisClientFactory",
    "AnalysisRequest",
    "AnalysisResult",
    "PromptBuilder",
    "ResponseNormalizer",
    "Variant",
]
