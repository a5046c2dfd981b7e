"""Quiz flow - Summary and short quiz questions from text or a document."""

from nuvia.core.exceptions import FlowInputError
from nuvia.core.logging_config import get_logger
from nuvia.flows import base
from nuvia.flows.media import media_content_blocks
from nuvia.models.study import QuestionType, QuizFromTextInput, QuizFromTextOutput, QuizQuestion

logger = get_logger(__name__)

MAX_QUESTIONS = 5
MISSING_SUMMARY = "Could not generate a summary for this content."

SYSTEM_PROMPT = """You are an expert at analyzing content and creating educational material.
Given some content, perform two tasks:
1.  Generate a concise summary of the content (2-4 sentences).
2.  Generate 1 to 5 quiz questions based *only* on the provided content.
    *   Prioritize creating 'short_answer' type questions.
    *   If you create 'multiple_choice' questions, give 3-4 options and make sure one of them is exactly the answer_text.
    *   Ensure questions are answerable directly from the content and cover different aspects if possible.
    *   Each question must have a unique id.
    *   Provide the correct answer for each question."""


def create_fallback_question() -> QuizQuestion:
    """Placeholder question used when the model produced none."""
    return QuizQuestion(
        id="fallback_q1",
        question_text="What is the main topic of the provided content?",
        answer_text="User needs to determine based on reading.",
        question_type=QuestionType.SHORT_ANSWER,
    )


def generate_quiz_from_text(quiz_input: QuizFromTextInput) -> QuizFromTextOutput:
    """
    Generate a summary and up to five questions from text or a document.

    Args:
        quiz_input: Text content, or a document data URI, plus optional file name

    Returns:
        QuizFromTextOutput; when the model produced no questions, a single
        fallback question is returned instead

    Raises:
        FlowInputError: If neither text nor a document is given
    """
    has_text = bool(quiz_input.text_content and quiz_input.text_content.strip())
    if not has_text and not quiz_input.document_data_uri:
        raise FlowInputError(
            "Either text_content or document_data_uri must be provided.",
            field="text_content",
        )

    name = f" (from a file named {quiz_input.file_name})" if quiz_input.file_name else ""
    if quiz_input.document_data_uri:
        content = base.build_content(
            f"CONTENT{name} (from document):",
            media_content_blocks(quiz_input.document_data_uri, quiz_input.file_name),
            "Generate the summary and questions.",
        )
    else:
        content = base.build_content(
            f"CONTENT{name} (from text):\n```\n{quiz_input.text_content}\n```",
            "Generate the summary and questions.",
        )

    output = base.run_structured_prompt(
        QuizFromTextOutput,
        SYSTEM_PROMPT,
        content,
        flow_name="generate_quiz_from_text",
    )

    summary = output.summary.strip() if output is not None and output.summary else ""
    questions = [q for q in output.questions if q.is_well_formed] if output is not None else []

    if output is not None and len(questions) < len(output.questions):
        logger.warning(
            f"Quiz flow: dropped {len(output.questions) - len(questions)} malformed questions"
        )

    if not questions:
        logger.warning("Quiz flow: no questions generated, using fallback question")
        questions = [create_fallback_question()]

    return QuizFromTextOutput(
        summary=summary or MISSING_SUMMARY,
        questions=questions[:MAX_QUESTIONS],
    )
