from collections.abc import Sequence

from career_analysis.analysis.client_base import BaseCompletionClient
from career_analysis.analysis.exceptions import (
    AnalysisBackendError,
    AnalysisError,
    AnalysisRateLimitError,
)
from career_analysis.logging.logger import Log


class AnalysisClient:
    """Submits a prompt to an ordered list of models, falling back on failure.

    Models are tried once each, in order, and the first completion wins.
    A rate-limit error always moves on to the next model. Any other backend
    error does the same while ``fallback_on_any_error`` is set; otherwise it
    ends the attempt immediately. There is no backoff between attempts and no
    timeout beyond the transport's own.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        models: Sequence[str],
        temperature: float = 0.2,
        fallback_on_any_error: bool = True,
        system_prompt: str = "",
    ) -> None:
        if not models:
            raise ValueError("At least one analysis model must be configured")
        self._client = client
        self._models = tuple(models)
        self._temperature = temperature
        self._fallback_on_any_error = fallback_on_any_error
        self._system_prompt = system_prompt

    @property
    def models(self) -> tuple[str, ...]:
        return self._models

    def submit(self, prompt: str) -> str:
        """Return the raw completion from the first model that answers.

        Raises:
            AnalysisError: when every model was tried and failed.
        """
        attempts: list[str] = []
        last_error: AnalysisBackendError | None = None
        for model in self._models:
            attempts.append(model)
            Log.info(f"Attempting analysis with model: {model}")
            try:
                completion = self._client.create_completion(
                    model=model,
                    temperature=self._temperature,
                    system_prompt=self._system_prompt,
                    user_prompt=prompt,
                )
            except AnalysisRateLimitError as exc:
                last_error = exc
                Log.warning(f"Quota exceeded for {model}, trying next model")
                continue
            except AnalysisBackendError as exc:
                last_error = exc
                Log.error(f"Analysis backend error with {model}: {exc}")
                if not self._fallback_on_any_error:
                    break
                continue
            Log.info(f"Model {model} returned {len(completion)} chars")
            return completion

        raise AnalysisError(
            f"Failed to analyze with {', '.join(attempts)}: {last_error}",
            attempts=attempts,
        ) from last_error
