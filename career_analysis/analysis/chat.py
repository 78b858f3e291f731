import json

from career_analysis.analysis.client import AnalysisClient
from career_analysis.analysis.prompt_loader import load_prompt_template
from career_analysis.logging.logger import Log
from career_analysis.processing.exceptions import RequestValidationError


class CareerChatAdvisor:
    """Answers the latest message of a career-advice chat.

    Uses the same model fallback policy as document analysis. Storing the
    history is the caller's job.
    """

    def __init__(self, client: AnalysisClient, template: str | None = None) -> None:
        self._client = client
        self._template = template if template is not None else load_prompt_template("chat_prompt")

    def reply(self, history: list[dict[str, str]]) -> str:
        if not isinstance(history, list) or not history:
            raise RequestValidationError("Invalid chat history provided")
        prompt = self._template.format(
            chat_history=json.dumps(history, indent=2, ensure_ascii=False, default=str)
        )
        response = self._client.submit(prompt).strip()
        Log.info(f"Chat response generated: {len(response)} chars")
        return response
