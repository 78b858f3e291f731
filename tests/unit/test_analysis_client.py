"""Tests for the multi-model AnalysisClient fallback policy."""

from unittest.mock import MagicMock, call, patch

import pytest

from career_analysis.analysis.client import AnalysisClient
from career_analysis.analysis.client_base import BaseCompletionClient
from career_analysis.analysis.exceptions import (
    AnalysisBackendError,
    AnalysisError,
    AnalysisRateLimitError,
)


def _make_client(
    side_effect: list[object],
    models: list[str] | None = None,
    fallback_on_any_error: bool = True,
) -> tuple[AnalysisClient, MagicMock]:
    backend = MagicMock(spec=BaseCompletionClient)
    backend.create_completion.side_effect = side_effect
    client = AnalysisClient(
        client=backend,
        models=models or ["model-a", "model-b"],
        temperature=0.2,
        fallback_on_any_error=fallback_on_any_error,
    )
    return client, backend


def _called_models(backend: MagicMock) -> list[str]:
    return [c.kwargs["model"] for c in backend.create_completion.call_args_list]


class TestSuccess:
    def test_returns_first_completion(self) -> None:
        client, backend = _make_client(["first"])

        assert client.submit("prompt") == "first"
        assert _called_models(backend) == ["model-a"]

    def test_passes_prompt_and_temperature(self) -> None:
        client, backend = _make_client(["ok"])

        client.submit("the prompt")

        assert backend.create_completion.call_args == call(
            model="model-a",
            temperature=0.2,
            system_prompt="",
            user_prompt="the prompt",
        )

    def test_passes_temperature_above_one_unchanged(self) -> None:
        backend = MagicMock(spec=BaseCompletionClient)
        backend.create_completion.return_value = "ok"
        client = AnalysisClient(client=backend, models=["m"], temperature=1.5)

        client.submit("p")

        assert backend.create_completion.call_args.kwargs["temperature"] == 1.5


class TestRateLimitFallback:
    def test_rate_limited_first_model_falls_back_to_second(self) -> None:
        client, backend = _make_client([AnalysisRateLimitError("429"), "from b"])

        assert client.submit("prompt") == "from b"
        assert _called_models(backend) == ["model-a", "model-b"]

    def test_does_not_call_models_beyond_the_one_that_answered(self) -> None:
        client, backend = _make_client(
            [AnalysisRateLimitError("429"), "from b"],
            models=["model-a", "model-b", "model-c"],
        )

        client.submit("prompt")

        assert _called_models(backend) == ["model-a", "model-b"]


class TestExhaustion:
    def test_raises_after_trying_every_model_once_in_order(self) -> None:
        client, backend = _make_client(
            [AnalysisRateLimitError("429"), AnalysisBackendError("500")]
        )

        with pytest.raises(AnalysisError) as exc_info:
            client.submit("prompt")

        assert _called_models(backend) == ["model-a", "model-b"]
        assert exc_info.value.attempts == ["model-a", "model-b"]

    def test_chains_last_underlying_error(self) -> None:
        last = AnalysisRateLimitError("quota for b")
        client, _backend = _make_client([AnalysisRateLimitError("quota for a"), last])

        with pytest.raises(AnalysisError, match="quota for b") as exc_info:
            client.submit("prompt")

        assert exc_info.value.__cause__ is last

    def test_single_model_failure_raises(self) -> None:
        client, backend = _make_client([AnalysisBackendError("down")], models=["only"])

        with pytest.raises(AnalysisError, match="down"):
            client.submit("prompt")
        assert backend.create_completion.call_count == 1


class TestNonRateLimitErrors:
    def test_falls_through_on_any_error_by_default(self) -> None:
        client, backend = _make_client([AnalysisBackendError("500"), "from b"])

        assert client.submit("prompt") == "from b"
        assert _called_models(backend) == ["model-a", "model-b"]

    def test_strict_mode_stops_on_non_rate_limit_error(self) -> None:
        client, backend = _make_client(
            [AnalysisBackendError("500"), "from b"],
            fallback_on_any_error=False,
        )

        with pytest.raises(AnalysisError, match="500"):
            client.submit("prompt")
        assert _called_models(backend) == ["model-a"]

    def test_strict_mode_still_falls_back_on_rate_limit(self) -> None:
        client, _backend = _make_client(
            [AnalysisRateLimitError("429"), "from b"],
            fallback_on_any_error=False,
        )

        assert client.submit("prompt") == "from b"


class TestConfiguration:
    def test_requires_at_least_one_model(self) -> None:
        with pytest.raises(ValueError, match="At least one analysis model"):
            AnalysisClient(client=MagicMock(), models=[])

    def test_exposes_model_order(self) -> None:
        client, _backend = _make_client(["ok"], models=["x", "y"])
        assert client.models == ("x", "y")


class TestLogging:
    def test_logs_each_fallback(self) -> None:
        client, _backend = _make_client([AnalysisRateLimitError("429"), "ok"])
        with patch("career_analysis.analysis.client.Log") as mock_log:
            client.submit("prompt")
        assert any("model-a" in c.args[0] for c in mock_log.warning.call_args_list)
