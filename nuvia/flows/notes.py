"""Study notes flows - Summary, key concepts, MCQs and flashcards from documents or transcripts."""

from typing import TypeVar

from nuvia.core.exceptions import FlowOutputError
from nuvia.core.logging_config import get_logger
from nuvia.flows import base
from nuvia.flows.media import media_content_blocks
from nuvia.models.study import (
    SmartNotesInput,
    SmartNotesOutput,
    StudyNotes,
    TranscriptNotesInput,
    TranscriptNotesOutput,
)

logger = get_logger(__name__)

NotesT = TypeVar("NotesT", bound=StudyNotes)

MAX_KEY_CONCEPTS = 7
MAX_MCQS = 7
MAX_FLASHCARDS = 10

EMPTY_TRANSCRIPT_SUMMARY = "No transcript provided or transcript was empty. Cannot generate notes."
NO_TRANSCRIPT_OUTPUT_SUMMARY = (
    "Failed to generate notes from transcript. The AI model did not return a valid output."
)
MISSING_TRANSCRIPT_SUMMARY = "Could not generate a summary for this transcript."
MISSING_DOCUMENT_SUMMARY = "Could not generate a summary for this document."

NOTES_TASKS = """Tasks:
1.  **Overall Summary**: {summary_task}
2.  **Key Concepts**: Identify and list 3 to 7 main key concepts or topics discussed. Present them as a list of strings.
3.  **Multiple Choice Questions (MCQs)**: Create 3 to 7 MCQs. Each MCQ must:
    *   Have a unique ID (e.g., "{mcq_id}").
    *   Have a clear question.
    *   Provide exactly 4 distinct options.
    *   Clearly indicate the correct answer (must be one of the options, copied exactly).
    *   Include a brief explanation for why that answer is correct, citing evidence or reasoning from the {source}.
    *   Cover different important parts of the {source}.
4.  **Flashcards**: Generate 3 to 10 flashcards. Each flashcard must:
    *   Have a unique ID (e.g., "{flashcard_id}").
    *   Have a clear "term" (a keyword, concept, or short question).
    *   Have a concise "definition" or answer for that term.
    *   Focus on important vocabulary, definitions, or core ideas.

Ensure all generated content is based *only* on the provided {source}.
If the {source} is very short or lacks enough distinct concepts for the minimum number of MCQs or flashcards, generate as many high-quality items as possible. If it is unsuitable for a particular type of note, return an empty list for that field but still fill in the others."""


def normalize_notes(output: NotesT, missing_summary: str) -> NotesT:
    """Fill in a missing summary, drop malformed MCQs and cap list lengths."""
    summary = output.summary.strip() if output.summary else ""
    mcqs = [mcq for mcq in output.mcqs if mcq.is_well_formed]
    if len(mcqs) < len(output.mcqs):
        logger.warning(f"Notes: dropped {len(output.mcqs) - len(mcqs)} malformed MCQs")
    return output.model_copy(
        update={
            "summary": summary or missing_summary,
            "key_concepts": [c for c in output.key_concepts if c.strip()][:MAX_KEY_CONCEPTS],
            "mcqs": mcqs[:MAX_MCQS],
            "flashcards": output.flashcards[:MAX_FLASHCARDS],
        }
    )


def generate_smart_notes(notes_input: SmartNotesInput) -> SmartNotesOutput:
    """
    Generate study notes from a document.

    Args:
        notes_input: The document as a data URI and an optional file name

    Returns:
        SmartNotesOutput with summary, key concepts, MCQs and flashcards

    Raises:
        FlowOutputError: If the model returns no output
        MediaError: If the document cannot be read
    """
    system_prompt = (
        "You are an expert AI assistant specializing in creating study materials "
        "for students from academic documents."
    )
    name = f" (named {notes_input.file_name})" if notes_input.file_name else ""
    content = base.build_content(
        f"Given the document{name}, please generate comprehensive study notes.",
        "Document Content:",
        media_content_blocks(notes_input.document_data_uri, notes_input.file_name),
        NOTES_TASKS.format(
            summary_task="Write a concise yet comprehensive summary of the entire document.",
            mcq_id="mcq-1",
            flashcard_id="flashcard-1",
            source="document",
        ),
    )

    output = base.run_structured_prompt(
        SmartNotesOutput,
        system_prompt,
        content,
        flow_name="generate_smart_notes",
    )
    if output is None:
        raise FlowOutputError(
            "Failed to generate smart notes. The AI model did not return an output.",
            flow="generate_smart_notes",
        )
    return normalize_notes(output, MISSING_DOCUMENT_SUMMARY)


def generate_notes_from_transcript(notes_input: TranscriptNotesInput) -> TranscriptNotesOutput:
    """
    Generate study notes from a video transcript.

    An empty transcript short-circuits to a fixed message without calling
    the model, and a missing model output yields empty notes rather than
    an error.

    Args:
        notes_input: Transcript text and optional video title

    Returns:
        TranscriptNotesOutput with summary, key concepts, MCQs and flashcards
    """
    if not notes_input.transcript or not notes_input.transcript.strip():
        return TranscriptNotesOutput(summary=EMPTY_TRANSCRIPT_SUMMARY)

    system_prompt = (
        "You are an expert AI assistant specializing in creating study materials "
        "from video lecture transcripts."
    )
    title = f'"{notes_input.video_title}"' if notes_input.video_title else "this video"
    tasks = NOTES_TASKS.format(
        summary_task="Write a concise summary of the transcript (2-3 paragraphs).",
        mcq_id="mcq-yt-1",
        flashcard_id="flashcard-yt-1",
        source="transcript",
    )
    user_prompt = f"""Given the transcript from {title}, please generate comprehensive study notes.

Video Transcript:
```
{notes_input.transcript}
```

{tasks}"""

    output = base.run_structured_prompt(
        TranscriptNotesOutput,
        system_prompt,
        user_prompt,
        flow_name="generate_notes_from_transcript",
    )
    if output is None:
        logger.warning("Transcript notes: model returned no output, using empty notes")
        return TranscriptNotesOutput(summary=NO_TRANSCRIPT_OUTPUT_SUMMARY)
    return normalize_notes(output, MISSING_TRANSCRIPT_SUMMARY)
