"""
Unit tests for LLMService parsing, prompting and failure mapping.

Uses LangChain's fake chat model so no provider is contacted.
Run: pytest tests/unit/test_llm_service.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import asyncio

import pytest
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from config.settings import Settings, settings
from utils.errors import LLMParseError, LLMTransportError, UpstreamError, ValidationError
from utils.llm_service import LLMService, extract_json_object, format_transcript


def run(coro):
    return asyncio.run(coro)


class RecordingModel:
    """Chat model stub that captures the messages it receives."""

    def __init__(self, reply="ok"):
        self.reply = reply
        self.calls = []

    async def ainvoke(self, messages, config=None):
        self.calls.append(messages)
        return AIMessage(content=self.reply)


class FailingModel:
    async def ainvoke(self, messages, config=None):
        raise ConnectionError("connection refused")


class ListContentModel:
    """Returns content as a list of blocks, the way Anthropic and Gemini can."""

    def __init__(self, content):
        self.content = content

    async def ainvoke(self, messages, config=None):
        return AIMessage(content=self.content)


class SlowModel:
    async def ainvoke(self, messages, config=None):
        await asyncio.sleep(5)
        return AIMessage(content="{}")


def service_for(model, timeout=None):
    return LLMService(provider="openai", model_name="test-model", timeout=timeout, model=model)


# ---------------------------------------------------------------------------
# extract_json_object / format_transcript
# ---------------------------------------------------------------------------

class TestExtractJsonObject:

    def test_plain_object(self):
        assert extract_json_object('{"strengths": ["a"]}') == {"strengths": ["a"]}

    def test_object_wrapped_in_prose_and_fences(self):
        content = 'Here is the analysis:\n```json\n{"threats": ["x"], "nested": {"k": 1}}\n```\nGood luck!'
        assert extract_json_object(content) == {"threats": ["x"], "nested": {"k": 1}}

    def test_no_object_raises(self):
        with pytest.raises(LLMParseError) as exc:
            extract_json_object("I cannot help with that.")
        assert "No valid JSON found" in exc.value.message

    def test_invalid_json_raises(self):
        with pytest.raises(LLMParseError):
            extract_json_object("{strengths: [a]}")


class TestFormatTranscript:

    def test_role_content_lines(self):
        messages = [
            {"role": "system", "content": "start", "timestamp": "t"},
            {"role": "LLM-strengths", "content": "solid", "timestamp": "t"},
        ]
        assert format_transcript(messages) == "system: start\nLLM-strengths: solid"

    def test_empty(self):
        assert format_transcript([]) == ""


# ---------------------------------------------------------------------------
# generate_swot
# ---------------------------------------------------------------------------

class TestGenerateSwot:

    def test_parses_fenced_reply(self):
        model = FakeListChatModel(responses=[
            '```json\n{"strengths": ["A"], "weaknesses": ["B"], "opportunities": ["C"], "threats": ["D"]}\n```'
        ])
        result = run(service_for(model).generate_swot("Should I switch to PM?", "SWE", "PM"))
        assert result.strengths == ["A"]
        assert result.threats == ["D"]

    def test_missing_quadrants_default_empty(self):
        model = FakeListChatModel(responses=['{"strengths": ["A"]}'])
        result = run(service_for(model).generate_swot("Q"))
        assert result.weaknesses == []
        assert result.opportunities == []

    def test_prompt_includes_roles_or_not_specified(self):
        model = RecordingModel(reply="{}")
        run(service_for(model).generate_swot("Should I switch?", "SWE", None))
        prompt = model.calls[0][0].content
        assert "Should I switch?" in prompt
        assert "Current Role: SWE" in prompt
        assert "Target Role: Not specified" in prompt

    def test_reply_without_json_is_parse_error(self):
        model = FakeListChatModel(responses=["Sorry, no analysis today."])
        with pytest.raises(LLMParseError):
            run(service_for(model).generate_swot("Q"))

    def test_wrong_shape_is_parse_error(self):
        model = FakeListChatModel(responses=['{"strengths": "not a list"}'])
        with pytest.raises(LLMParseError):
            run(service_for(model).generate_swot("Q"))

    def test_transport_failure(self):
        with pytest.raises(LLMTransportError) as exc:
            run(service_for(FailingModel()).generate_swot("Q"))
        assert "connection refused" in exc.value.message
        assert isinstance(exc.value, UpstreamError)

    def test_timeout_is_transport_error(self):
        with pytest.raises(LLMTransportError) as exc:
            run(service_for(SlowModel(), timeout=0.05).generate_swot("Q"))
        assert "timed out" in exc.value.message


# ---------------------------------------------------------------------------
# generate_turn
# ---------------------------------------------------------------------------

class TestGenerateTurn:

    def test_focus_and_transcript_in_prompts(self):
        model = RecordingModel(reply="Consider your network.")
        prior = [{"role": "system", "content": "Starting", "timestamp": "t"}]

        reply = run(service_for(model).generate_turn("vazir", "Question: Q", prior, "opportunities"))

        assert reply == "Consider your network."
        system_message, human_message = model.calls[0]
        assert "Vazir" in system_message.content
        assert "Focus specifically on opportunities analysis." in system_message.content
        assert "Question: Q" in human_message.content
        assert "system: Starting" in human_message.content

    def test_without_focus(self):
        model = RecordingModel()
        run(service_for(model).generate_turn("gawi", "ctx", []))
        assert "Focus specifically" not in model.calls[0][0].content

    def test_unknown_agent_is_validation_error(self):
        with pytest.raises(ValidationError):
            run(service_for(RecordingModel()).generate_turn("oracle", "ctx", []))

    def test_unknown_section_is_validation_error(self):
        with pytest.raises(ValidationError):
            run(service_for(RecordingModel()).generate_turn("vazir", "ctx", [], "luck"))

    def test_transport_failure(self):
        with pytest.raises(LLMTransportError):
            run(service_for(FailingModel()).generate_turn("vazir", "ctx", [], "threats"))


# ---------------------------------------------------------------------------
# List content replies
# ---------------------------------------------------------------------------

class TestListContent:

    def test_empty_list_is_parse_error(self):
        with pytest.raises(LLMParseError) as exc:
            run(service_for(ListContentModel([])).generate_swot("Q"))
        assert isinstance(exc.value, UpstreamError)

    def test_string_blocks_are_joined(self):
        model = ListContentModel(['{"strengths": ', '["a"]}'])
        result = run(service_for(model).generate_swot("Q"))
        assert result.strengths == ["a"]

    def test_text_blocks_are_joined_and_others_skipped(self):
        model = ListContentModel([
            {"type": "thinking", "thinking": "hmm"},
            {"type": "text", "text": "Consider "},
            {"type": "text", "text": "your network."},
        ])
        reply = run(service_for(model).generate_turn("vazir", "ctx", [], "strengths"))
        assert reply == "Consider your network."

    def test_no_text_blocks_is_parse_error(self):
        model = ListContentModel([{"type": "image", "source": {}}])
        with pytest.raises(LLMParseError):
            run(service_for(model).generate_turn("vazir", "ctx", []))


# ---------------------------------------------------------------------------
# Provider loader
# ---------------------------------------------------------------------------

class TestProviderLoader:

    def test_anthropic_models(self):
        service = LLMService(provider="anthropic", model_name="claude-sonnet-4-20250514", timeout=30)

        assert isinstance(service.swot_model, ChatAnthropic)
        assert service.swot_model.model == "claude-sonnet-4-20250514"
        assert service.swot_model.max_tokens == settings.SWOT_MAX_TOKENS
        assert service.turn_model.max_tokens == settings.TURN_MAX_TOKENS
        assert service.swot_model.max_retries == 0

    def test_provider_name_is_case_insensitive(self):
        service = LLMService(provider="Anthropic", model_name="claude-sonnet-4-20250514")
        assert service.provider == "anthropic"

    def test_unsupported_provider(self):
        with pytest.raises(ValueError):
            LLMService(provider="mystery", model_name="m")

    def test_anthropic_key_lookup(self):
        configured = Settings(LLM_PROVIDER="anthropic", ANTHROPIC_API_KEY="sk-ant-test")
        assert configured.provider_api_key() == "sk-ant-test"
