"""Tests for the chat session."""

from nuvia.chat.session import SESSION_ERROR_MESSAGE, SUMMARIZE_PREFIX, ChatSession
from nuvia.core.exceptions import LLMError
from nuvia.models import ChatInput, ChatOutput


class RecordingResponder:
    """Responder that records its inputs and replies from a script."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.inputs: list[ChatInput] = []

    def __call__(self, chat_input: ChatInput) -> ChatOutput:
        self.inputs.append(chat_input)
        reply = self.replies.pop(0) if self.replies else "ok"
        if isinstance(reply, Exception):
            raise reply
        return ChatOutput(response=reply)


class TestChatSessionSend:
    """Test sending messages."""

    def test_records_user_and_ai_messages(self):
        """Test a normal exchange."""
        session = ChatSession(responder=RecordingResponder("Hello!"))

        reply = session.send("  Hi there  ")

        assert reply.sender == "ai"
        assert reply.text == "Hello!"
        assert [m.sender for m in session.history] == ["user", "ai"]
        assert session.history[0].text == "Hi there"

    def test_blank_input_is_ignored(self):
        """Test that nothing is sent for blank text without media."""
        responder = RecordingResponder()
        session = ChatSession(responder=responder)

        assert session.send("   ") is None
        assert session.message_count == 0
        assert responder.inputs == []

    def test_media_without_text_is_sent(self, png_data_uri):
        """Test that an attachment alone is enough to send."""
        responder = RecordingResponder("A cat.")
        session = ChatSession(responder=responder)

        session.send("", media_data_uri=png_data_uri, media_type="image", file_name="cat.png")

        assert responder.inputs[0].media_data_uri == png_data_uri
        assert responder.inputs[0].media_type == "image"
        assert session.history[0].file_name == "cat.png"

    def test_history_excludes_current_message(self):
        """Test that only previous messages are sent as history."""
        responder = RecordingResponder("first", "second")
        session = ChatSession(responder=responder)

        session.send("one")
        session.send("two")

        assert responder.inputs[0].history == []
        second_history = responder.inputs[1].history
        assert [item.role for item in second_history] == ["user", "model"]
        assert second_history[0].text == "one"
        assert responder.inputs[1].user_input == "two"

    def test_history_is_truncated_to_last_twenty(self):
        """Test the history window."""
        responder = RecordingResponder()
        session = ChatSession(responder=responder)

        for i in range(15):
            session.send(f"message {i}")

        last_history = responder.inputs[-1].history
        assert len(last_history) == 20
        # 28 previous messages; the oldest eight are dropped
        assert last_history[0].text == "message 4"

    def test_history_window_from_settings(self, monkeypatch):
        """Test MAX_HISTORY_MESSAGES."""
        monkeypatch.setenv("MAX_HISTORY_MESSAGES", "2")
        responder = RecordingResponder()
        session = ChatSession(responder=responder)

        for i in range(3):
            session.send(f"m{i}")

        assert len(responder.inputs[-1].history) == 2

    def test_error_becomes_apology_message(self):
        """Test that responder errors do not escape."""
        session = ChatSession(responder=RecordingResponder(LLMError("down")))

        reply = session.send("hi")

        assert reply.text == SESSION_ERROR_MESSAGE
        assert session.last_error == "down"

    def test_unexpected_error_becomes_apology_message(self):
        """Test that any responder failure still produces a reply."""
        session = ChatSession(responder=RecordingResponder(ValueError("bad state")))

        reply = session.send("hi")

        assert reply.text == SESSION_ERROR_MESSAGE
        assert [m.sender for m in session.history] == ["user", "ai"]
        assert session.last_error == "bad state"

    def test_ai_reply_keeps_indentation(self):
        """Test that reply text is stored unchanged."""
        code = "    print('hi')\n"
        session = ChatSession(responder=RecordingResponder(code))

        reply = session.send("show code")

        assert reply.text == code

    def test_empty_response_becomes_apology_message(self):
        """Test that an empty reply is treated as an error."""
        session = ChatSession(responder=RecordingResponder("   "))

        reply = session.send("hi")

        assert reply.text == SESSION_ERROR_MESSAGE
        assert session.last_error is not None

    def test_uses_chat_flow_by_default(self, fake_llm):
        """Test the default responder end to end."""
        fake_llm.replies = ["From the model"]
        session = ChatSession()

        reply = session.send("hi")

        assert reply.text == "From the model"


class TestChatSessionHelpers:
    """Test summarize and clear."""

    def test_summarize_text_prefixes_request(self):
        """Test the summarize request."""
        responder = RecordingResponder("Short version")
        session = ChatSession(responder=responder)

        session.summarize_text("A long passage.")

        assert responder.inputs[0].user_input == f"{SUMMARIZE_PREFIX}A long passage."

    def test_summarize_blank_text(self):
        """Test that blank text is not sent."""
        session = ChatSession(responder=RecordingResponder())
        assert session.summarize_text("  ") is None

    def test_clear(self):
        """Test clearing the conversation."""
        session = ChatSession(responder=RecordingResponder(LLMError("x")))
        session.send("hi")

        session.clear()

        assert session.message_count == 0
        assert session.last_error is None
