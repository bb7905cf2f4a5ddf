"""Unit tests for SummaryService and prompt assembly.

The Gemini client is always mocked; no network access.
"""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_check as check
from google.genai import types

from pdf_summarizer.agent.config import SummaryConfig
from pdf_summarizer.agent.prompts import SUMMARY_SYSTEM_PROMPT
from pdf_summarizer.agent.summarizer import (
    ConfigurationError,
    EmptyInputError,
    EmptyResponseError,
    SummaryService,
    build_prompt,
    estimate_token_count,
    normalize_text,
)

TEST_KEY = "AIzaSy-test-key"


def _response(*texts: str | None) -> types.GenerateContentResponse:
    """Build a Gemini response with one candidate holding the given parts."""
    parts = [types.Part(text=t) for t in texts]
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


def _mock_client(response: types.GenerateContentResponse | None = None) -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=response if response is not None else _response("# Summary")
    )
    return client


@pytest.fixture
def config() -> SummaryConfig:
    """Config with a test key and default generation settings."""
    return SummaryConfig(api_key=TEST_KEY, model_name="gemini-test")


class TestHelpers:
    """Tests for normalization, token estimation and prompt building."""

    def test_normalize_collapses_whitespace_runs(self) -> None:
        """Runs of two or more whitespace characters become one space."""
        assert normalize_text("  a  b\n\nc\td \n e  ") == "a b c\td e"

    def test_estimate_rounds_up(self) -> None:
        """Token estimate is ceil(characters / 4)."""
        check.equal(estimate_token_count(""), 0)
        check.equal(estimate_token_count("abcd"), 1)
        check.equal(estimate_token_count("abcde"), 2)
        check.equal(estimate_token_count("a" * 4001), 1001)

    def test_prompt_without_instructions(self) -> None:
        """Prompt is system prompt, directive, then text."""
        prompt = build_prompt("Document body.")

        check.is_true(prompt.startswith(SUMMARY_SYSTEM_PROMPT))
        check.is_true(prompt.endswith("proper markdown formatting:\n\nDocument body."))
        check.is_not_in("IMPORTANT", prompt)

    def test_prompt_with_instructions(self) -> None:
        """Custom instructions are inserted verbatim before the directive."""
        prompt = build_prompt("Body.", "  Focus on risks  ")

        expected_clause = "\n\nIMPORTANT: Follow these specific instructions:   Focus on risks  \n\n"
        check.is_in(expected_clause, prompt)
        check.less(prompt.index(expected_clause), prompt.index("Transform this document"))

    def test_blank_instructions_ignored(self) -> None:
        """Whitespace-only instructions add nothing to the prompt."""
        assert build_prompt("Body.", "   ") == build_prompt("Body.")


class TestGenerateSummary:
    """Tests for SummaryService.generate_summary."""

    async def test_returns_response_text(self, config: SummaryConfig) -> None:
        """The first part's text is returned verbatim."""
        client = _mock_client(_response("## Title\n\n• 🚀 Point  "))
        service = SummaryService(config=config, client=client)

        summary = await service.generate_summary("Some   document\n\ntext.")

        assert summary == "## Title\n\n• 🚀 Point  "

    async def test_sends_single_turn_request(self, config: SummaryConfig) -> None:
        """Request uses the configured model, a user turn and fixed parameters."""
        client = _mock_client()
        service = SummaryService(config=config, client=client)

        await service.generate_summary("Some   document\n\ntext.", "Be brief")

        client.aio.models.generate_content.assert_awaited_once()
        kwargs = client.aio.models.generate_content.call_args.kwargs
        check.equal(kwargs["model"], "gemini-test")
        check.equal(len(kwargs["contents"]), 1)
        check.equal(kwargs["contents"][0]["role"], "user")
        check.equal(
            kwargs["contents"][0]["parts"],
            [{"text": build_prompt("Some document text.", "Be brief")}],
        )
        check.equal(kwargs["config"].temperature, 0.7)
        check.equal(kwargs["config"].max_output_tokens, 1500)

    async def test_uses_configured_generation_parameters(self) -> None:
        """Temperature and token cap come from config."""
        config = SummaryConfig(api_key=TEST_KEY, temperature=0.2, max_output_tokens=300)
        client = _mock_client()

        await SummaryService(config=config, client=client).generate_summary("text")

        kwargs = client.aio.models.generate_content.call_args.kwargs
        check.equal(kwargs["config"].temperature, 0.2)
        check.equal(kwargs["config"].max_output_tokens, 300)

    async def test_missing_key_raises_before_network(self) -> None:
        """No API key raises ConfigurationError without calling Gemini."""
        client = _mock_client()
        service = SummaryService(config=SummaryConfig(api_key=""), client=client)

        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            await service.generate_summary("Some text")

        client.aio.models.generate_content.assert_not_called()

    @patch("pdf_summarizer.agent.summarizer.genai.Client")
    async def test_missing_key_never_builds_client(self, mock_client_class: MagicMock) -> None:
        """Without a key the Gemini client is not even constructed."""
        service = SummaryService(config=SummaryConfig(api_key=""))

        with pytest.raises(ConfigurationError):
            await service.generate_summary("Some text")

        mock_client_class.assert_not_called()

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n  "])
    async def test_empty_input_raises_before_network(
        self, config: SummaryConfig, text: str
    ) -> None:
        """Empty or whitespace-only text raises EmptyInputError."""
        client = _mock_client()
        service = SummaryService(config=config, client=client)

        with pytest.raises(EmptyInputError):
            await service.generate_summary(text)

        client.aio.models.generate_content.assert_not_called()

    @pytest.mark.parametrize(
        "response",
        [
            types.GenerateContentResponse(candidates=[]),
            types.GenerateContentResponse(candidates=[types.Candidate()]),
            types.GenerateContentResponse(
                candidates=[types.Candidate(content=types.Content(role="model", parts=[]))]
            ),
            _response(None),
            _response(""),
        ],
    )
    async def test_empty_response_raises(
        self, config: SummaryConfig, response: types.GenerateContentResponse
    ) -> None:
        """A response without text raises EmptyResponseError."""
        service = SummaryService(config=config, client=_mock_client(response))

        with pytest.raises(EmptyResponseError, match="Empty response"):
            await service.generate_summary("Some text")

    async def test_service_error_reraised_unchanged(
        self, config: SummaryConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Client errors are logged and propagate as the same object."""
        error = RuntimeError("quota exceeded")
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(side_effect=error)
        service = SummaryService(config=config, client=client)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError) as exc_info:
                await service.generate_summary("Some text")

        check.is_(exc_info.value, error)
        check.equal(client.aio.models.generate_content.await_count, 1)
        check.is_in("quota exceeded", caplog.text)

    async def test_large_input_only_warns(
        self, config: SummaryConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Inputs over the token threshold log a warning and still run."""
        client = _mock_client()
        service = SummaryService(config=config, client=client)

        with caplog.at_level(logging.WARNING, logger="pdf_summarizer.agent.summarizer"):
            summary = await service.generate_summary("a" * 3_200_004)

        check.equal(summary, "# Summary")
        check.is_in("very long", caplog.text)

    @patch("pdf_summarizer.agent.summarizer.genai.Client")
    async def test_client_built_from_config_key(
        self, mock_client_class: MagicMock, config: SummaryConfig
    ) -> None:
        """The Gemini client is created once with the configured key."""
        mock_client_class.return_value = _mock_client()
        service = SummaryService(config=config)

        await service.generate_summary("first")
        await service.generate_summary("second")

        mock_client_class.assert_called_once_with(api_key=TEST_KEY)


class TestGetSummaryService:
    """Tests for get_summary_service singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        """get_summary_service returns the same instance on multiple calls."""
        import pdf_summarizer.agent.summarizer as summarizer_module

        with (
            patch.object(summarizer_module, "_summary_service", None),
            patch.object(summarizer_module, "SummaryService") as mock_service,
        ):
            mock_service.return_value = MagicMock()

            first = summarizer_module.get_summary_service()
            second = summarizer_module.get_summary_service()

            assert first is second
            mock_service.assert_called_once()
