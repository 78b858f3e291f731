"""Coerces free-form model completions into AnalysisResult records."""

import json
import math
import re
from typing import Any

from career_analysis.analysis.exceptions import MalformedResponseError
from career_analysis.analysis.models import (
    AnalysisResult,
    MalformedResponse,
    ParsedResponse,
    ValidResponse,
    Variant,
)
from career_analysis.extraction.text import normalize_text
from career_analysis.logging.logger import Log

_CODE_FENCE_RE = re.compile(r"```(?:json)?")

_SCORE_MIN = 0
_SCORE_MAX = 100


def clean_completion(raw: str) -> str:
    """Strip Markdown code fences and stray backticks, collapse blank lines."""
    cleaned = _CODE_FENCE_RE.sub("", raw).replace("`", "")
    return normalize_text(cleaned)


def parse_completion(raw: str) -> ParsedResponse:
    cleaned = clean_completion(raw)
    try:
        parsed = json.loads(cleaned)
    except ValueError as exc:
        return MalformedResponse(raw=raw, reason=f"Invalid JSON response: {exc}")
    if not isinstance(parsed, dict):
        return MalformedResponse(raw=raw, reason="JSON response must be an object")
    return ValidResponse(data=parsed)


class ResponseNormalizer:
    """Builds a fully populated AnalysisResult from an untrusted completion.

    Scores become integers in 0..100 (0 when missing or not numeric), list
    fields are kept only when the model returned a list, and text fields
    default to an empty string. ``profileCompleteness`` is only read for the
    LinkedIn profile variant.
    """

    def normalize(self, raw: str, variant: Variant) -> AnalysisResult:
        parsed = parse_completion(raw)
        if isinstance(parsed, MalformedResponse):
            Log.error(f"Unparseable analysis response: {parsed.reason}")
            Log.debug(f"Raw analysis response:\n{parsed.raw}")
            raise MalformedResponseError(parsed.reason, raw=parsed.raw)

        data = parsed.data
        profile_completeness = None
        if variant is Variant.LINKEDIN_PROFILE:
            profile_completeness = _coerce_score(data.get("profileCompleteness"))

        result = AnalysisResult(
            match_score=_coerce_score(data.get("matchScore")),
            strengths=_coerce_list(data.get("strengths")),
            gaps=_coerce_list(data.get("gaps")),
            improvements=_coerce_list(data.get("improvements")),
            optimized_section=_coerce_text(data.get("optimizedSection")),
            before_after_comparison=_coerce_text(data.get("beforeAfterComparison")),
            keyword_match_score=_coerce_score(data.get("keywordMatchScore")),
            profile_completeness=profile_completeness,
        )
        Log.info(
            f"Normalized {variant.value} analysis: match score {result.match_score}, "
            f"keyword score {result.keyword_match_score}"
        )
        return result


def _coerce_score(value: Any) -> int:
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (bool, int, float)):
        return 0
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(_SCORE_MIN, min(_SCORE_MAX, round(number)))


def _coerce_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_coerce_text(item) for item in value if item is not None]


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)
