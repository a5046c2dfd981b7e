"""Tests for the chat workflow state and routing."""

from nuvia.graph.state import create_initial_state
from nuvia.graph.workflow import compile_chat_workflow, create_chat_workflow, should_retry
from nuvia.models import ChatInput


class TestCreateInitialState:
    """Test initial state creation."""

    def test_initial_state_fields(self):
        """Test that the state starts empty."""
        chat_input = ChatInput(user_input="hi")
        state = create_initial_state(chat_input)

        assert state["chat_input"] is chat_input
        assert state["response"] == ""
        assert state["attempts"] == 0
        assert state["error"] is None

    def test_max_attempts_from_settings(self, monkeypatch):
        """Test that CHAT_EMPTY_RETRIES sets the attempt budget."""
        monkeypatch.setenv("CHAT_EMPTY_RETRIES", "3")

        state = create_initial_state(ChatInput(user_input="hi"))

        assert state["max_attempts"] == 4

    def test_max_attempts_is_at_least_one(self):
        """Test that the model is always called once."""
        state = create_initial_state(ChatInput(user_input="hi"), max_attempts=0)
        assert state["max_attempts"] == 1


class TestShouldRetry:
    """Test the retry routing decision."""

    def make_state(self, **overrides):
        state = create_initial_state(ChatInput(user_input="hi"), max_attempts=2)
        state.update(overrides)
        return state

    def test_finalize_on_reply(self):
        """Test that a non-empty reply ends the loop."""
        assert should_retry(self.make_state(response="Hello", attempts=1)) == "finalize"

    def test_retry_on_empty_reply(self):
        """Test that an empty reply is retried while attempts remain."""
        assert should_retry(self.make_state(response="  ", attempts=1)) == "retry"

    def test_finalize_when_attempts_exhausted(self):
        """Test the attempt limit."""
        assert should_retry(self.make_state(response="", attempts=2)) == "finalize"

    def test_errors_are_not_retried(self):
        """Test that errors go straight to finalize."""
        assert should_retry(self.make_state(error="boom", attempts=1)) == "finalize"


class TestWorkflow:
    """Test workflow construction."""

    def test_workflow_has_nodes(self):
        """Test that both nodes are registered."""
        workflow = create_chat_workflow()
        assert {"respond", "finalize"} <= set(workflow.nodes)

    def test_workflow_compiles(self):
        """Test that the workflow compiles."""
        assert compile_chat_workflow() is not None
