import httpx
import openai

from career_analysis.analysis.client_base import BaseCompletionClient
from career_analysis.analysis.exceptions import AnalysisBackendError, AnalysisRateLimitError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client for any OpenAI-compatible chat API (Gemini included)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except openai.RateLimitError as exc:
            raise AnalysisRateLimitError(f"AI provider rate limit exceeded: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisBackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisBackendError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisBackendError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisBackendError("AI returned empty response")
        return content
