"""Question answering flow - Answers strictly from provided text or a document."""

from nuvia.core.exceptions import FlowInputError, FlowOutputError
from nuvia.flows import base
from nuvia.flows.media import media_content_blocks
from nuvia.models.study import AnswerQuestionInput, AnswerQuestionOutput

SYSTEM_PROMPT = """You are an AI assistant that answers questions based *strictly* on the provided context.
Do not use any external knowledge. If the answer cannot be found in the context, say so."""


def answer_question_from_text(question_input: AnswerQuestionInput) -> AnswerQuestionOutput:
    """
    Answer a question using only the supplied context.

    Args:
        question_input: The question plus context text or a document

    Returns:
        AnswerQuestionOutput with the answer

    Raises:
        FlowInputError: If neither context text nor a document is given
        FlowOutputError: If the model returns no answer
    """
    has_text = bool(question_input.context_text and question_input.context_text.strip())
    if not has_text and not question_input.document_data_uri:
        raise FlowInputError(
            "Either context_text or document_data_uri must be provided for Q&A.",
            field="context_text",
        )

    if question_input.document_data_uri:
        label = f' "{question_input.file_name}"' if question_input.file_name else ""
        context = [
            f"Context (from document{label}):",
            media_content_blocks(question_input.document_data_uri, question_input.file_name),
        ]
    else:
        context = [f"Context Text:\n```\n{question_input.context_text}\n```"]

    content = base.build_content(
        *context,
        f'User\'s Question:\n"{question_input.user_question}"',
        "Based *only* on the Context provided above, answer the User's Question.",
    )

    output = base.run_structured_prompt(
        AnswerQuestionOutput,
        SYSTEM_PROMPT,
        content,
        flow_name="answer_question_from_text",
    )
    if output is None or not output.answer.strip():
        raise FlowOutputError(
            "AI failed to answer the question.", flow="answer_question_from_text"
        )
    return output
