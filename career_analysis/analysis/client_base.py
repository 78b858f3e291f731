from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific text completion clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's completion as plain text.

        Raises:
            AnalysisRateLimitError: when the provider reports a rate limit.
            AnalysisBackendError: on any other provider or transport failure.
        """
