"""Offline completion client.

Returns a fixed, well-formed analysis so the whole pipeline can run without
credentials. Also serves as the template for new provider adapters: implement
BaseCompletionClient and register the provider in AnalysisClientFactory.
"""

import json
from typing import ClassVar

from career_analysis.analysis.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Adapter that answers every prompt with the same analysis JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "matchScore": 70,
        "strengths": ["Relevant experience"],
        "gaps": ["No quantified achievements"],
        "improvements": ["Add measurable results to recent roles"],
        "optimizedSection": "Results-driven engineer with a track record of delivery.",
        "beforeAfterComparison": "Before: generic summary. After: keyword-aligned summary.",
        "keywordMatchScore": 65,
        "profileCompleteness": 80,
    }

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
