"""Tests for shared model access helpers."""

import pytest
from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from nuvia.core.exceptions import LLMError
from nuvia.flows import base
from nuvia.models import AnswerQuestionOutput, HistoryItem


class TestGetChatModel:
    """Test provider selection."""

    def test_anthropic_provider(self, monkeypatch):
        """Test that LLM_PROVIDER=anthropic builds ChatAnthropic."""
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

        model = base.get_chat_model(temperature=0.2)

        assert isinstance(model, ChatAnthropic)
        assert model.temperature == 0.2

    def test_bedrock_provider(self, monkeypatch):
        """Test that the default provider builds ChatBedrock."""
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

        model = base.get_chat_model()

        assert isinstance(model, ChatBedrock)


class TestBuildContent:
    """Test message content assembly."""

    def test_text_only_joins_into_string(self):
        """Test that text parts become one string."""
        assert base.build_content("a", None, "b") == "a\nb"

    def test_media_produces_block_list(self, png_data_uri):
        """Test that media blocks force list content."""
        image_block = {"type": "image_url", "image_url": {"url": png_data_uri}}
        content = base.build_content("Look:", [image_block])

        assert content == [{"type": "text", "text": "Look:"}, image_block]


class TestHistoryToMessages:
    """Test history conversion."""

    def test_roles_map_to_message_types(self):
        """Test user and model roles."""
        history = [
            HistoryItem(role="user", parts=[{"text": "Hi"}]),
            HistoryItem(role="model", parts=[{"text": "Hello"}, {"text": "!"}]),
        ]

        messages = base.history_to_messages(history)

        assert isinstance(messages[0], HumanMessage)
        assert isinstance(messages[1], AIMessage)
        assert messages[1].content == "Hello!"

    def test_none_history(self):
        """Test that missing history yields no messages."""
        assert base.history_to_messages(None) == []


class TestMessageText:
    """Test reply text extraction."""

    def test_block_content(self):
        """Test a reply made of content blocks."""
        message = AIMessage(content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "there"}])
        assert base.message_text(message) == "Hello there"


class TestRunStructuredPrompt:
    """Test structured prompt execution."""

    def test_sends_system_and_human_messages(self, fake_llm):
        """Test the message layout."""
        fake_llm.structured = AnswerQuestionOutput(answer="42")

        result = base.run_structured_prompt(AnswerQuestionOutput, "system", "question")

        assert result.answer == "42"
        messages = fake_llm.calls[0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert fake_llm.schemas == [AnswerQuestionOutput]

    def test_dict_result_is_validated(self, fake_llm):
        """Test that dict output is parsed into the schema."""
        fake_llm.structured = {"answer": "from dict"}

        result = base.run_structured_prompt(AnswerQuestionOutput, "system", "question")

        assert isinstance(result, AnswerQuestionOutput)
        assert result.answer == "from dict"

    def test_none_result(self, fake_llm):
        """Test that a missing output is returned as None."""
        assert base.run_structured_prompt(AnswerQuestionOutput, "system", "question") is None

    def test_model_failure_raises_llm_error(self, fake_llm):
        """Test that provider errors are wrapped."""
        fake_llm.error = RuntimeError("throttled")

        with pytest.raises(LLMError) as exc_info:
            base.run_structured_prompt(AnswerQuestionOutput, "system", "question", flow_name="test_flow")

        assert exc_info.value.details == "throttled"
        assert "test_flow" in exc_info.value.message
