"""DOCX document generator for study notes and quizzes."""

from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from nuvia.models.study import MCQ, QuestionType, QuizFromTextOutput, StudyNotes

OPTION_LETTERS = "ABCD"
HEADING_COLOR = RGBColor(0, 51, 102)
ANSWER_COLOR = RGBColor(0, 128, 0)
MUTED_COLOR = RGBColor(64, 64, 64)


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, extension: str = "docx") -> str:
    """
    Generate a filename with timestamp.

    Args:
        base_name: Base name for the file
        extension: File extension (without dot)

    Returns:
        Filename with timestamp
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # Clean the base name to remove any path components
    base_name = Path(base_name).stem
    return f"{base_name}_{timestamp}.{extension}"


def resolve_output_path(output_path: str, use_output_dir: bool, output_dir: str) -> str:
    """Return the final file path, timestamped inside output_dir when requested."""
    if not use_output_dir:
        return output_path
    directory = ensure_output_directory(output_dir)
    return str(directory / generate_timestamped_filename(output_path))


def setup_document_styles(doc: Document) -> None:
    """
    Set up document-wide styles.

    Args:
        doc: Document to configure
    """
    font = doc.styles["Normal"].font
    font.name = "Calibri"
    font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_title(doc: Document, title: str) -> None:
    """Add a centred title and generation date."""
    heading = doc.add_heading(title, level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    date_para = doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = RGBColor(128, 128, 128)


def add_section_heading(doc: Document, text: str) -> None:
    heading = doc.add_heading(text, level=1)
    heading.runs[0].font.color.rgb = HEADING_COLOR


def add_mcqs(doc: Document, mcqs: list[MCQ], include_answers: bool = False) -> None:
    """
    Add multiple choice questions, optionally marking the answers.

    Args:
        doc: Document to add to
        mcqs: Questions to add
        include_answers: If True, highlights the correct option and adds explanations
    """
    add_section_heading(doc, "Multiple Choice Questions")

    for i, mcq in enumerate(mcqs, 1):
        q_para = doc.add_paragraph()
        q_run = q_para.add_run(f"Q{i}. ")
        q_run.bold = True
        q_run.font.size = Pt(12)
        q_para.add_run(mcq.question)

        for letter, option in zip(OPTION_LETTERS, mcq.options):
            opt_para = doc.add_paragraph(f"   {letter}. {option}")
            opt_para.paragraph_format.left_indent = Inches(0.5)

            if include_answers and option == mcq.correct_answer:
                opt_para.runs[0].bold = True
                opt_para.runs[0].font.color.rgb = ANSWER_COLOR
                opt_para.add_run(" ✓").font.color.rgb = ANSWER_COLOR

        if include_answers and mcq.explanation:
            exp_para = doc.add_paragraph()
            exp_para.paragraph_format.left_indent = Inches(0.5)
            exp_run = exp_para.add_run(f"Explanation: {mcq.explanation}")
            exp_run.italic = True
            exp_run.font.size = Pt(10)
            exp_run.font.color.rgb = MUTED_COLOR

        doc.add_paragraph()


def add_answer_key(doc: Document, mcqs: list[MCQ]) -> None:
    """Add an answer key table for the MCQs on a new page."""
    doc.add_page_break()
    header = doc.add_heading("Answer Key", level=1)
    header.alignment = WD_ALIGN_PARAGRAPH.CENTER
    header.runs[0].font.color.rgb = HEADING_COLOR

    table = doc.add_table(rows=1, cols=3)
    table.style = "Light Grid Accent 1"

    header_cells = table.rows[0].cells
    header_cells[0].text = "Q#"
    header_cells[1].text = "Answer"
    header_cells[2].text = "Explanation"
    for cell in header_cells:
        for paragraph in cell.paragraphs:
            for run in paragraph.runs:
                run.bold = True

    for i, mcq in enumerate(mcqs, 1):
        row_cells = table.add_row().cells
        row_cells[0].text = str(i)
        row_cells[1].text = f"{OPTION_LETTERS[mcq.correct_index]} - {mcq.correct_answer}"
        row_cells[2].text = mcq.explanation or "N/A"


def add_flashcards(doc: Document, notes: StudyNotes) -> None:
    """Add flashcards as a two-column term/definition table."""
    add_section_heading(doc, "Flashcards")

    table = doc.add_table(rows=1, cols=2)
    table.style = "Light Grid Accent 1"
    table.rows[0].cells[0].text = "Term"
    table.rows[0].cells[1].text = "Definition"

    for card in notes.flashcards:
        row_cells = table.add_row().cells
        row_cells[0].text = card.term
        row_cells[1].text = card.definition

    doc.add_paragraph()


def export_notes_to_docx(
    notes: StudyNotes,
    output_path: str,
    title: str = "Study Notes",
    include_answers: bool = False,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export study notes to a formatted DOCX file.

    Args:
        notes: Notes to export
        output_path: File path, or base name when use_output_dir is True
        title: Document title
        include_answers: If True, marks MCQ answers inline; otherwise an answer key is appended
        use_output_dir: If True, saves a timestamped file inside output_dir
        output_dir: Directory to save files in

    Returns:
        Path to the created DOCX file
    """
    output_path = resolve_output_path(output_path, use_output_dir, output_dir)

    doc = Document()
    setup_document_styles(doc)
    add_title(doc, title)

    add_section_heading(doc, "Summary")
    for paragraph in notes.summary.split("\n\n"):
        if paragraph.strip():
            doc.add_paragraph(paragraph.strip())

    if notes.key_concepts:
        add_section_heading(doc, "Key Concepts")
        for concept in notes.key_concepts:
            doc.add_paragraph(concept, style="List Bullet")

    if notes.mcqs:
        add_mcqs(doc, notes.mcqs, include_answers)

    if notes.flashcards:
        add_flashcards(doc, notes)

    if notes.mcqs and not include_answers:
        add_answer_key(doc, notes.mcqs)

    doc.save(output_path)
    return output_path


def export_quiz_to_docx(
    quiz: QuizFromTextOutput,
    output_path: str,
    title: str = "Quiz",
    include_answers: bool = False,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export a quiz generated from text to a DOCX file.

    Args:
        quiz: Quiz output to export
        output_path: File path, or base name when use_output_dir is True
        title: Document title
        include_answers: If True, writes the answer under each question
        use_output_dir: If True, saves a timestamped file inside output_dir
        output_dir: Directory to save files in

    Returns:
        Path to the created DOCX file
    """
    output_path = resolve_output_path(output_path, use_output_dir, output_dir)

    doc = Document()
    setup_document_styles(doc)
    add_title(doc, title)

    if quiz.summary:
        add_section_heading(doc, "Summary")
        doc.add_paragraph(quiz.summary)

    add_section_heading(doc, "Questions")
    for i, question in enumerate(quiz.questions, 1):
        q_para = doc.add_paragraph()
        q_para.add_run(f"Q{i}. ").bold = True
        q_para.add_run(question.question_text)

        if question.question_type == QuestionType.MULTIPLE_CHOICE and question.options:
            for letter, option in zip(OPTION_LETTERS, question.options):
                opt_para = doc.add_paragraph(f"   {letter}. {option}")
                opt_para.paragraph_format.left_indent = Inches(0.5)
        elif question.question_type == QuestionType.TRUE_FALSE:
            doc.add_paragraph("   True / False").paragraph_format.left_indent = Inches(0.5)

        if include_answers:
            ans_para = doc.add_paragraph()
            ans_para.paragraph_format.left_indent = Inches(0.5)
            ans_run = ans_para.add_run(f"Answer: {question.answer_text}")
            ans_run.italic = True
            ans_run.font.color.rgb = ANSWER_COLOR

        doc.add_paragraph()

    doc.save(output_path)
    return output_path
