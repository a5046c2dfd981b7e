"""AI flows: typed prompt wrappers around the hosted model."""

from .answer_question import answer_question_from_text
from .assignment_plan import generate_assignment_plan
from .chat import generate_chat_response
from .notes import generate_notes_from_transcript, generate_smart_notes
from .quiz import generate_quiz_from_text
from .riddle import get_riddle
from .smart_tasks import smart_task_creation
from .summarize import analyze_image, summarize_document

__all__ = [
    "generate_chat_response",
    "answer_question_from_text",
    "generate_assignment_plan",
    "generate_notes_from_transcript",
    "generate_smart_notes",
    "generate_quiz_from_text",
    "get_riddle",
    "smart_task_creation",
    "summarize_document",
    "analyze_image",
]
