"""Tests for turning model completions into AnalysisResult records."""

import json
import sys
from unittest.mock import patch

import pytest

from career_analysis.analysis.exceptions import MalformedResponseError
from career_analysis.analysis.models import (
    AnalysisResult,
    MalformedResponse,
    ValidResponse,
    Variant,
)
from career_analysis.analysis.normalizer import (
    ResponseNormalizer,
    clean_completion,
    parse_completion,
)

REQUIRED_PAYLOAD: dict[str, object] = {
    "matchScore": 80,
    "strengths": ["Python"],
    "gaps": [],
    "improvements": ["Add metrics"],
    "optimizedSection": "...",
    "beforeAfterComparison": "...",
    "keywordMatchScore": 75,
}


def _normalize(raw: str, variant: Variant = Variant.RESUME) -> AnalysisResult:
    return ResponseNormalizer().normalize(raw, variant)


class TestCleanCompletion:
    def test_strips_json_code_fence(self) -> None:
        assert clean_completion('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_plain_code_fence(self) -> None:
        assert clean_completion('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_removes_stray_backticks_and_blank_lines(self) -> None:
        assert clean_completion('`{"a": 1,\n\n\n"b": 2}`') == '{"a": 1,\n"b": 2}'


class TestParseCompletion:
    def test_object_is_valid(self) -> None:
        parsed = parse_completion('{"matchScore": 1}')
        assert parsed == ValidResponse(data={"matchScore": 1})

    def test_prose_is_malformed(self) -> None:
        parsed = parse_completion("Here is your analysis!")
        assert isinstance(parsed, MalformedResponse)
        assert parsed.raw == "Here is your analysis!"
        assert "Invalid JSON" in parsed.reason

    def test_array_is_malformed(self) -> None:
        parsed = parse_completion("[1, 2]")
        assert isinstance(parsed, MalformedResponse)
        assert "must be an object" in parsed.reason


class TestFencedScenario:
    def test_coerces_string_score_and_omits_profile_completeness(self) -> None:
        raw = (
            '```json\n{"matchScore": 80, "strengths": ["Python"], "gaps": [], '
            '"improvements": ["Add metrics"], "optimizedSection": "...", '
            '"beforeAfterComparison": "...", "keywordMatchScore": "75"}\n```'
        )
        result = _normalize(raw)

        assert result.keyword_match_score == 75
        assert result.match_score == 80
        assert result.strengths == ["Python"]
        assert result.profile_completeness is None
        assert "profileCompleteness" not in result.to_payload()


class TestExtraFieldsIgnored:
    def test_superset_equals_required_fields(self) -> None:
        payload = dict(REQUIRED_PAYLOAD, summary="extra", profileCompleteness=90)
        result = _normalize(json.dumps(payload))
        assert result.to_payload() == REQUIRED_PAYLOAD


class TestDefaults:
    def test_empty_object_gets_every_default(self) -> None:
        result = _normalize("{}")
        assert result.to_payload() == {
            "matchScore": 0,
            "strengths": [],
            "gaps": [],
            "improvements": [],
            "optimizedSection": "",
            "beforeAfterComparison": "",
            "keywordMatchScore": 0,
        }

    @pytest.mark.parametrize("field", sorted(REQUIRED_PAYLOAD))
    def test_each_missing_field_is_defaulted(self, field: str) -> None:
        payload = dict(REQUIRED_PAYLOAD)
        del payload[field]
        result = _normalize(json.dumps(payload)).to_payload()
        assert result[field] in (0, [], "")

    def test_null_values_are_defaulted(self) -> None:
        payload = {key: None for key in REQUIRED_PAYLOAD}
        result = _normalize(json.dumps(payload))
        assert result == AnalysisResult()


class TestCoercion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("75", 75),
            (" 42 ", 42),
            (66.6, 67),
            ("n/a", 0),
            ("", 0),
            (True, 1),
            (150, 100),
            (-5, 0),
            ({"score": 5}, 0),
        ],
    )
    def test_scores(self, value: object, expected: int) -> None:
        result = _normalize(json.dumps({"matchScore": value}))
        assert result.match_score == expected

    def test_non_finite_score_is_zero(self) -> None:
        assert _normalize('{"matchScore": NaN}').match_score == 0

    def test_score_too_large_for_float_is_zero(self) -> None:
        raw = '{"matchScore": ' + "9" * 400 + "}"
        assert _normalize(raw).match_score == 0

    def test_non_list_lists_become_empty(self) -> None:
        result = _normalize(json.dumps({"strengths": "Python", "gaps": {"a": 1}}))
        assert result.strengths == []
        assert result.gaps == []

    def test_list_items_become_strings(self) -> None:
        result = _normalize(json.dumps({"improvements": ["Add metrics", 3, None]}))
        assert result.improvements == ["Add metrics", "3"]

    def test_non_string_text_fields_are_stringified(self) -> None:
        result = _normalize(json.dumps({"optimizedSection": {"summary": "x"}}))
        assert result.optimized_section == '{"summary": "x"}'


class TestLinkedInVariant:
    def test_includes_profile_completeness(self) -> None:
        payload = dict(REQUIRED_PAYLOAD, profileCompleteness="90")
        result = _normalize(json.dumps(payload), Variant.LINKEDIN_PROFILE)
        assert result.profile_completeness == 90
        assert result.to_payload()["profileCompleteness"] == 90

    def test_missing_profile_completeness_defaults_to_zero(self) -> None:
        result = _normalize(json.dumps(REQUIRED_PAYLOAD), Variant.LINKEDIN_PROFILE)
        assert result.to_payload()["profileCompleteness"] == 0


class TestMalformed:
    def test_prose_raises(self) -> None:
        with pytest.raises(MalformedResponseError, match="Invalid JSON") as exc_info:
            _normalize("I think this candidate is great")
        assert exc_info.value.raw == "I think this candidate is great"

    def test_array_raises(self) -> None:
        with pytest.raises(MalformedResponseError, match="must be an object"):
            _normalize("```json\n[]\n```")

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter has no integer string length limit",
    )
    def test_integer_beyond_digit_limit_raises(self) -> None:
        raw = '{"matchScore": ' + "9" * 5000 + "}"
        with pytest.raises(MalformedResponseError, match="Invalid JSON"):
            _normalize(raw)

    def test_logs_raw_response_at_debug(self) -> None:
        with patch("career_analysis.analysis.normalizer.Log") as mock_log:
            with pytest.raises(MalformedResponseError):
                _normalize("not json")
        assert any("not json" in c.args[0] for c in mock_log.debug.call_args_list)
