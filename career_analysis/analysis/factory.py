from typing import ClassVar

from career_analysis.analysis.client import AnalysisClient
from career_analysis.analysis.client_base import BaseCompletionClient
from career_analysis.analysis.example_client_adapter import ExampleClientAdapter
from career_analysis.analysis.openai_client_adapter import OpenAIClientAdapter
from career_analysis.config.settings import Settings


class AnalysisClientFactory:
    """Creates the configured multi-model AnalysisClient.

    Raises ValueError at startup when the provider is unknown or its
    credentials are missing, so misconfiguration never surfaces per request.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"example", "ollama"})

    @classmethod
    def create(cls, settings: Settings) -> AnalysisClient:
        """Create an AnalysisClient for the configured provider and model list."""
        if settings.analysis_provider.lower() == "example":
            return AnalysisClient(
                client=ExampleClientAdapter(),
                models=["example"],
                temperature=0.0,
            )
        return AnalysisClient(
            client=cls.create_completion_client(settings),
            models=settings.analysis_models,
            temperature=settings.analysis_temperature,
            fallback_on_any_error=settings.analysis_fallback_on_any_error,
        )

    @classmethod
    def create_completion_client(cls, settings: Settings) -> BaseCompletionClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_base_url is required for analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.analysis_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key = settings.analysis_api_key.strip()
        if not key and provider not in cls.KEYLESS_PROVIDERS:
            raise ValueError(f"analysis_api_key is required for analysis_provider={provider}")
        return key or "unused"
