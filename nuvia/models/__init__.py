"""Data models for the study assistant flows."""

from .chat import ChatInput, ChatMessage, ChatOutput, HistoryItem, HistoryPart, MediaType
from .game import GetRiddleInput, Riddle, Routine, RoutineStep
from .planning import (
    AssignmentPlanInput,
    AssignmentPlanOutput,
    PlanItem,
    SmartTask,
    SmartTaskInput,
    SmartTaskList,
)
from .study import (
    MCQ,
    AnalyzeImageInput,
    AnalyzeImageOutput,
    AnswerQuestionInput,
    AnswerQuestionOutput,
    Flashcard,
    QuestionType,
    QuizFromTextInput,
    QuizFromTextOutput,
    QuizQuestion,
    SmartNotesInput,
    SmartNotesOutput,
    StudyNotes,
    SummarizeDocumentInput,
    SummarizeDocumentOutput,
    TranscriptNotesInput,
    TranscriptNotesOutput,
)

__all__ = [
    # Chat
    "ChatInput",
    "ChatOutput",
    "ChatMessage",
    "HistoryItem",
    "HistoryPart",
    "MediaType",
    # Study material
    "MCQ",
    "Flashcard",
    "StudyNotes",
    "SmartNotesInput",
    "SmartNotesOutput",
    "TranscriptNotesInput",
    "TranscriptNotesOutput",
    "QuestionType",
    "QuizQuestion",
    "QuizFromTextInput",
    "QuizFromTextOutput",
    "AnswerQuestionInput",
    "AnswerQuestionOutput",
    "SummarizeDocumentInput",
    "SummarizeDocumentOutput",
    "AnalyzeImageInput",
    "AnalyzeImageOutput",
    # Planning
    "SmartTaskInput",
    "SmartTask",
    "SmartTaskList",
    "AssignmentPlanInput",
    "AssignmentPlanOutput",
    "PlanItem",
    # Game and routines
    "Riddle",
    "GetRiddleInput",
    "Routine",
    "RoutineStep",
]
