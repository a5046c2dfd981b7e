"""Export functionality for study documents."""

from .docx_generator import export_notes_to_docx, export_quiz_to_docx

__all__ = ["export_notes_to_docx", "export_quiz_to_docx"]
