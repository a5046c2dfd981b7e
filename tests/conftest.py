"""Shared test fixtures and configuration for pytest."""

import base64
import io
from typing import Any

import pytest
from docx import Document
from langchain_core.messages import AIMessage
from langchain_core.output_parsers.openai_tools import PydanticToolsParser
from langchain_core.runnables import RunnableLambda

from nuvia.config.settings import get_settings
from nuvia.models import (
    MCQ,
    Flashcard,
    QuestionType,
    QuizFromTextOutput,
    QuizQuestion,
    SmartNotesOutput,
)


class FakeStructuredModel:
    """Result of ``with_structured_output``: returns the preset structured value."""

    def __init__(self, parent: "FakeChatModel", schema: type):
        self.parent = parent
        self.schema = schema

    def invoke(self, messages: list) -> Any:
        self.parent.calls.append(messages)
        if self.parent.error is not None:
            raise self.parent.error
        return self.parent.structured


class FakeChatModel:
    """
    Stand-in for the hosted chat model.

    ``structured`` is returned by structured-output calls; ``replies`` are
    consumed in order by plain ``invoke`` calls (an empty string once they
    run out).
    """

    def __init__(self):
        self.structured: Any = None
        self.replies: list[str] = []
        self.error: Exception | None = None
        self.calls: list[list] = []
        self.schemas: list[type] = []
        self.temperatures: list[float | None] = []

    def with_structured_output(self, schema: type) -> FakeStructuredModel:
        self.schemas.append(schema)
        return FakeStructuredModel(self, schema)

    def invoke(self, messages: list) -> AIMessage:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        reply = self.replies.pop(0) if self.replies else ""
        return AIMessage(content=reply)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_llm(monkeypatch) -> FakeChatModel:
    """Patch model construction so flows talk to a FakeChatModel."""
    model = FakeChatModel()

    def fake_get_chat_model(temperature=None):
        model.temperatures.append(temperature)
        return model

    monkeypatch.setattr("nuvia.flows.base.get_chat_model", fake_get_chat_model)
    return model


def make_data_uri(mime_type: str, data: bytes) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def png_data_uri() -> str:
    """A tiny PNG-typed data URI."""
    return make_data_uri("image/png", b"\x89PNG\r\n\x1a\n fake image bytes")


@pytest.fixture
def pdf_data_uri() -> str:
    """A PDF-typed data URI."""
    return make_data_uri("application/pdf", b"%PDF-1.4 fake pdf body")


@pytest.fixture
def text_data_uri() -> str:
    """A plain text data URI."""
    return make_data_uri("text/plain", b"Photosynthesis converts light energy into chemical energy.")


@pytest.fixture
def docx_bytes() -> bytes:
    """A small DOCX document with one paragraph and a table."""
    doc = Document()
    doc.add_paragraph("Mitochondria are the powerhouse of the cell.")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "ATP"
    table.rows[0].cells[1].text = "Energy currency"
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_data_uri(docx_bytes: bytes) -> str:
    from nuvia.flows.media import DOCX_MIME

    return make_data_uri(DOCX_MIME, docx_bytes)


@pytest.fixture
def sample_mcq() -> MCQ:
    """Create a sample MCQ for testing."""
    return MCQ(
        id="mcq-1",
        question="What is the capital of France?",
        options=["London", "Paris", "Berlin", "Madrid"],
        correct_answer="Paris",
        explanation="Paris is the capital and largest city of France.",
    )


@pytest.fixture
def sample_notes(sample_mcq: MCQ) -> SmartNotesOutput:
    """Create sample study notes for testing."""
    return SmartNotesOutput(
        summary="Photosynthesis turns light into chemical energy.\n\nIt happens in chloroplasts.",
        key_concepts=["Chlorophyll", "Light reactions", "Calvin cycle"],
        mcqs=[
            sample_mcq,
            MCQ(
                id="mcq-2",
                question="Where does photosynthesis happen?",
                options=["Nucleus", "Chloroplast", "Ribosome", "Vacuole"],
                correct_answer="Chloroplast",
                explanation="Chloroplasts contain chlorophyll.",
            ),
        ],
        flashcards=[
            Flashcard(id="flashcard-1", term="Chlorophyll", definition="Green pigment that absorbs light"),
            Flashcard(id="flashcard-2", term="Stomata", definition="Pores for gas exchange"),
        ],
    )


@pytest.fixture
def sample_quiz_output() -> QuizFromTextOutput:
    """Create a sample quiz output for testing."""
    return QuizFromTextOutput(
        summary="A short text about the water cycle.",
        questions=[
            QuizQuestion(
                id="q1",
                question_text="What drives evaporation?",
                answer_text="The sun",
            ),
            QuizQuestion(
                id="q2",
                question_text="Which is a form of precipitation?",
                answer_text="Rain",
                question_type=QuestionType.MULTIPLE_CHOICE,
                options=["Rain", "Steam", "Fog"],
            ),
            QuizQuestion(
                id="q3",
                question_text="Clouds are made of water droplets.",
                answer_text="True",
                question_type=QuestionType.TRUE_FALSE,
            ),
        ],
    )


@pytest.fixture
def data_uri_factory():
    """Build a data URI from a MIME type and raw bytes."""
    return make_data_uri


class ToolCallingChatModel:
    """
    Stand-in that answers structured-output calls with a tool call.

    The reply goes through langchain's ``PydanticToolsParser`` so schema
    validation runs exactly as it does for a hosted model.
    """

    def __init__(self):
        self.tool_args: dict[str, Any] = {}

    def with_structured_output(self, schema: type):
        def reply(_messages):
            return AIMessage(
                content="",
                tool_calls=[{"name": schema.__name__, "args": self.tool_args, "id": "call_1"}],
            )

        return RunnableLambda(reply) | PydanticToolsParser(tools=[schema], first_tool_only=True)


@pytest.fixture
def tool_call_llm(monkeypatch) -> ToolCallingChatModel:
    """Patch model construction so flows parse tool-call replies."""
    model = ToolCallingChatModel()
    monkeypatch.setattr("nuvia.flows.base.get_chat_model", lambda temperature=None: model)
    return model
