"""Pydantic models for study material: notes, MCQs, flashcards and quizzes."""

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from .chat import CAMEL_CONFIG


class QuestionType(str, Enum):
    """Kinds of quiz question generated from text."""

    SHORT_ANSWER = "short_answer"
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"


# "B", "b)", "(B)", "B. Paris", "Option B - Paris"
LETTER_ANSWER_PATTERN = re.compile(
    r"^(?:option\s+)?\(?([a-z])(?:\)|[.:\-]|\s|$)\s*[.:\-]?\s*(.*)$",
    re.IGNORECASE | re.DOTALL,
)


def match_option(answer: str, options: list[str] | None) -> str | None:
    """
    Resolve an answer to the option it names.

    The answer may be the option text (case and surrounding spaces are
    ignored) or an option letter, optionally followed by the option text.

    Args:
        answer: Answer as given by the model
        options: Candidate options

    Returns:
        The matching option, or None when nothing matches
    """
    if not options:
        return None

    wanted = answer.strip().lower()
    for option in options:
        if option.strip().lower() == wanted:
            return option

    letter = LETTER_ANSWER_PATTERN.match(answer.strip())
    if letter is None:
        return None
    index = ord(letter.group(1).lower()) - ord("a")
    if index >= len(options):
        return None
    rest = letter.group(2).strip().lower()
    if rest and rest != options[index].strip().lower():
        return None
    return options[index]


class MCQ(BaseModel):
    """
    A multiple choice question.

    The schema is lenient so one sloppy question does not invalidate a
    whole model response; flows keep only questions where
    ``is_well_formed`` holds.
    """

    id: str = Field(..., description="A unique identifier for the MCQ (e.g., mcq-1).")
    question: str = Field(..., description="The MCQ question text.")
    options: list[str] = Field(
        default_factory=list,
        description="An array of exactly 4 string options for the MCQ.",
    )
    correct_answer: str = Field(
        "",
        description="The correct answer string, which must be one of the options, copied exactly.",
    )
    explanation: str = Field("", description="A brief explanation for why the answer is correct.")

    model_config = CAMEL_CONFIG

    @model_validator(mode="after")
    def resolve_correct_answer(self) -> "MCQ":
        """Replace letter or loosely cased answers with the option text."""
        match = match_option(self.correct_answer, self.options)
        if match is not None:
            self.correct_answer = match
        return self

    @property
    def is_well_formed(self) -> bool:
        """Four distinct options, one of which is the correct answer."""
        return (
            len(self.options) == 4
            and len(set(self.options)) == 4
            and self.correct_answer in self.options
        )

    @property
    def correct_index(self) -> int:
        return self.options.index(self.correct_answer)


class Flashcard(BaseModel):
    """A term/definition pair."""

    id: str = Field(..., description="A unique identifier for the flashcard (e.g., flashcard-1).")
    term: str = Field(..., description="The term or question for the front of the flashcard.")
    definition: str = Field(..., description="The definition or answer for the back of the flashcard.")


class StudyNotes(BaseModel):
    """Summary, key concepts, MCQs and flashcards for a piece of content."""

    summary: str = Field("", description="A concise yet comprehensive summary of the content.")
    key_concepts: list[str] = Field(
        default_factory=list,
        description="A list of 3-7 key concepts from the content, presented as bullet points.",
    )
    mcqs: list[MCQ] = Field(
        default_factory=list,
        description="An array of 3-7 Multiple Choice Questions covering different aspects of the content.",
    )
    flashcards: list[Flashcard] = Field(
        default_factory=list,
        description="An array of 3-10 flashcards (term/definition pairs) derived from the content.",
    )

    model_config = CAMEL_CONFIG


class SmartNotesInput(BaseModel):
    """Input for smart notes generated from a document."""

    document_data_uri: str = Field(
        ...,
        description="A document (PDF, DOCX), as a data URI that must include a MIME type and use Base64 encoding.",
    )
    file_name: str | None = Field(None, description="The name of the document file.")

    model_config = CAMEL_CONFIG


class SmartNotesOutput(StudyNotes):
    """Study notes generated from a document."""


class TranscriptNotesInput(BaseModel):
    """Input for notes generated from a video transcript."""

    transcript: str = Field("", description="The full text transcript of the video.")
    video_title: str | None = Field(None, description="The title of the video, if available.")

    model_config = CAMEL_CONFIG


class TranscriptNotesOutput(StudyNotes):
    """Study notes generated from a video transcript."""


class QuizQuestion(BaseModel):
    """A single question generated from text or a document."""

    id: str = Field(..., description="A unique identifier for the question.")
    question_text: str = Field(
        ...,
        description="The text of the quiz question. Ensure it's answerable from the provided content.",
    )
    answer_text: str = Field(
        ...,
        description="The correct answer to the question, concise and taken from the content if possible.",
    )
    question_type: QuestionType = Field(
        QuestionType.SHORT_ANSWER,
        description="The type of question. Aim for 'short_answer' if other types are hard to formulate.",
    )
    options: list[str] | None = Field(
        None,
        description="For 'multiple_choice', provide 3-4 options. The 'answer_text' must be one of these options.",
    )

    model_config = CAMEL_CONFIG

    @model_validator(mode="after")
    def resolve_answer_text(self) -> "QuizQuestion":
        """Replace a letter answer to a multiple choice question with the option text."""
        if self.question_type == QuestionType.MULTIPLE_CHOICE:
            match = match_option(self.answer_text, self.options)
            if match is not None:
                self.answer_text = match
        return self

    @property
    def is_well_formed(self) -> bool:
        """Multiple choice questions need options containing the answer."""
        if not self.question_text.strip() or not self.answer_text.strip():
            return False
        if self.question_type == QuestionType.MULTIPLE_CHOICE:
            return bool(self.options) and self.answer_text in self.options
        return True


class QuizFromTextInput(BaseModel):
    """Input for quiz generation from text or a document."""

    text_content: str | None = Field(None, description="The text content to process.")
    document_data_uri: str | None = Field(
        None,
        description="A document to process, as a data URI with a MIME type and Base64 encoding.",
    )
    file_name: str | None = Field(
        None,
        description="The optional name of the file this text or document came from.",
    )

    model_config = CAMEL_CONFIG


class QuizFromTextOutput(BaseModel):
    """Summary plus up to five questions."""

    summary: str = Field("", description="A concise summary of the provided content (2-4 sentences).")
    questions: list[QuizQuestion] = Field(
        default_factory=list,
        description=(
            "An array of 1-5 quiz questions based on the content. Prioritize 'short_answer' "
            "questions and cover different parts of the content."
        ),
    )


class AnswerQuestionInput(BaseModel):
    """Input for answering a question from provided context."""

    user_question: str = Field(..., description="The question asked by the user.")
    context_text: str | None = Field(
        None,
        description="The text content that should be used to answer the question.",
    )
    document_data_uri: str | None = Field(
        None,
        description="A document to answer from, as a data URI with a MIME type and Base64 encoding.",
    )
    file_name: str | None = Field(None, description="The optional name of the source file.")

    model_config = CAMEL_CONFIG

    @field_validator("user_question")
    @classmethod
    def question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("A question is required")
        return v.strip()


class AnswerQuestionOutput(BaseModel):
    """Answer grounded in the provided context."""

    answer: str = Field(
        ...,
        description=(
            "A comprehensive answer to the user's question based only on the provided context. "
            "If the context doesn't provide enough information, state that clearly."
        ),
    )


class SummarizeDocumentInput(BaseModel):
    """Input for document summarisation."""

    document_data_uri: str = Field(
        ...,
        description="A document to summarize, as a data URI with a MIME type and Base64 encoding.",
    )

    model_config = CAMEL_CONFIG


class SummarizeDocumentOutput(BaseModel):
    """A document summary."""

    summary: str = Field(..., description="A clear, well-structured summary of the document.")


class AnalyzeImageInput(BaseModel):
    """Input for image analysis."""

    photo_data_uri: str = Field(
        ...,
        description="A photo, as a data URI with an image MIME type and Base64 encoding.",
    )

    model_config = CAMEL_CONFIG


class AnalyzeImageOutput(BaseModel):
    """Description and study-relevant analysis of an image."""

    analysis_results: str = Field(
        ...,
        description="A description of the image content and any text, diagrams or problems it contains.",
    )

    model_config = CAMEL_CONFIG
