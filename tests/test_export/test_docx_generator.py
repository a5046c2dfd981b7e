"""Tests for DOCX export functionality."""

import os

from docx import Document

from nuvia.export.docx_generator import (
    ensure_output_directory,
    export_notes_to_docx,
    export_quiz_to_docx,
    generate_timestamped_filename,
)


def document_text(path: str) -> str:
    doc = Document(path)
    text = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            text.extend(cell.text for cell in row.cells)
    return "\n".join(text)


class TestEnsureOutputDirectory:
    """Test output directory creation."""

    def test_creates_directory_if_not_exists(self, tmp_path):
        """Test that directory is created if it doesn't exist."""
        output_dir = tmp_path / "test_output"
        result = ensure_output_directory(str(output_dir))

        assert output_dir.is_dir()
        assert result == output_dir

    def test_does_not_fail_if_directory_exists(self, tmp_path):
        """Test that function works if directory already exists."""
        output_dir = tmp_path / "test_output"
        output_dir.mkdir()

        assert ensure_output_directory(str(output_dir)) == output_dir


class TestGenerateTimestampedFilename:
    """Test timestamped filename generation."""

    def test_generates_filename_with_timestamp(self):
        """Test that filename includes timestamp."""
        filename = generate_timestamped_filename("notes", "docx")

        assert filename.startswith("notes_")
        assert filename.endswith(".docx")
        assert len(filename) > len("notes_.docx")

    def test_handles_path_in_base_name(self):
        """Test that paths in base name are handled correctly."""
        filename = generate_timestamped_filename("/path/to/notes", "docx")

        assert filename.startswith("notes_")


class TestExportNotesToDocx:
    """Test study notes export."""

    def test_creates_docx_file(self, sample_notes, tmp_path):
        """Test that DOCX file is created at the given path."""
        output_path = tmp_path / "notes.docx"

        result = export_notes_to_docx(sample_notes, str(output_path), use_output_dir=False)

        assert result == str(output_path)
        assert os.path.exists(result)

    def test_contains_all_sections(self, sample_notes, tmp_path):
        """Test that summary, concepts, questions and flashcards are written."""
        result = export_notes_to_docx(
            sample_notes, str(tmp_path / "notes.docx"), title="Biology", use_output_dir=False
        )
        text = document_text(result)

        assert "Biology" in text
        assert "It happens in chloroplasts." in text
        assert "Calvin cycle" in text
        assert "What is the capital of France?" in text
        assert "Green pigment that absorbs light" in text

    def test_answer_key_when_answers_hidden(self, sample_notes, tmp_path):
        """Test that an answer key is appended by default."""
        result = export_notes_to_docx(sample_notes, str(tmp_path / "notes.docx"), use_output_dir=False)
        text = document_text(result)

        assert "Answer Key" in text
        assert "B - Paris" in text

    def test_inline_answers(self, sample_notes, tmp_path):
        """Test that inline answers replace the answer key."""
        result = export_notes_to_docx(
            sample_notes, str(tmp_path / "notes.docx"), include_answers=True, use_output_dir=False
        )
        text = document_text(result)

        assert "Answer Key" not in text
        assert "Explanation: Paris is the capital" in text

    def test_uses_output_directory(self, sample_notes, tmp_path):
        """Test timestamped output inside the output directory."""
        output_dir = tmp_path / "exports"

        result = export_notes_to_docx(sample_notes, "biology", output_dir=str(output_dir))

        assert result.startswith(str(output_dir))
        assert os.path.basename(result).startswith("biology_")
        assert os.path.exists(result)


class TestExportQuizToDocx:
    """Test quiz export."""

    def test_questions_and_options(self, sample_quiz_output, tmp_path):
        """Test that every question and option is written."""
        result = export_quiz_to_docx(sample_quiz_output, str(tmp_path / "quiz.docx"), use_output_dir=False)
        text = document_text(result)

        assert "What drives evaporation?" in text
        assert "B. Steam" in text
        assert "True / False" in text
        assert "Answer:" not in text

    def test_with_answers(self, sample_quiz_output, tmp_path):
        """Test that answers are included on request."""
        result = export_quiz_to_docx(
            sample_quiz_output, str(tmp_path / "quiz.docx"), include_answers=True, use_output_dir=False
        )

        assert "Answer: The sun" in document_text(result)
