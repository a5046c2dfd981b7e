"""Typer CLI application for the Nuvia study assistant."""

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from nuvia import __version__
from nuvia.chat.session import ChatSession
from nuvia.config.settings import get_settings
from nuvia.core.exceptions import FlowInputError, NuviaError
from nuvia.core.logging_config import setup_logging
from nuvia.export.docx_generator import export_notes_to_docx, export_quiz_to_docx
from nuvia.flows import (
    analyze_image,
    answer_question_from_text,
    generate_assignment_plan,
    generate_notes_from_transcript,
    generate_quiz_from_text,
    generate_smart_notes,
    smart_task_creation,
    summarize_document,
)
from nuvia.flows.media import file_to_data_uri, parse_data_uri
from nuvia.game.riddles import RiddleGame
from nuvia.models import (
    AnalyzeImageInput,
    AnswerQuestionInput,
    AssignmentPlanInput,
    QuizFromTextInput,
    SmartNotesInput,
    SmartTaskInput,
    StudyNotes,
    SummarizeDocumentInput,
    TranscriptNotesInput,
)
from nuvia.planning.checklist import parse_plan, progress
from nuvia.routines import ROUTINE_TEMPLATES, format_time, get_routine

app = typer.Typer(
    name="nuvia",
    help="Nuvia - AI study assistant for notes, quizzes, plans and chat",
    add_completion=False,
)

console = Console()


def today() -> str:
    """Today's date in the format the planning flows expect."""
    return date.today().strftime("%B %d, %Y")


def fail(error: Exception) -> None:
    """Print an error and exit with code 1."""
    message = error.message if isinstance(error, NuviaError) else str(error)
    console.print(f"\n[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


def build_input(schema: type[BaseModel], **fields) -> BaseModel:
    """Build a flow input from command-line values, exiting cleanly when they are invalid."""
    try:
        return schema(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        message = first["msg"].removeprefix("Value error, ")
        field = ".".join(str(part) for part in first.get("loc", ()))
        fail(FlowInputError(message, field=field or None))


def run_with_spinner(description: str, fn, *args):
    """Run a flow while showing a spinner, exiting cleanly on Nuvia errors."""
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as spinner:
            spinner.add_task(f"[cyan]{description}...", total=None)
            return fn(*args)
    except NuviaError as e:
        fail(e)


def read_data_uri(path: Path) -> str:
    try:
        return file_to_data_uri(path)
    except NuviaError as e:
        fail(e)


@app.command()
def chat() -> None:
    """
    Start an interactive chat with Nuvia AI.

    Commands inside the chat:
        /attach PATH   attach a file to your next message
        /summarize     summarize the text that follows
        /clear         start a new conversation
        /quit          leave the chat
    """
    session = ChatSession()
    attachment: Optional[tuple[str, str, str]] = None

    console.print(
        Panel(
            "Ask me anything about your studies. Type [bold]/quit[/bold] to exit.",
            title="Nuvia AI",
            border_style="cyan",
        )
    )

    while True:
        try:
            text = console.input("[bold cyan]You:[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = text.strip()
        if command in ("/quit", "/exit"):
            break
        if command == "/clear":
            session.clear()
            attachment = None
            console.print("[yellow]Conversation cleared.[/yellow]")
            continue
        if command.startswith("/attach "):
            path = Path(command[len("/attach "):].strip())
            try:
                uri = file_to_data_uri(path)
                mime_type = parse_data_uri(uri).mime_type
            except NuviaError as e:
                console.print(f"[red]{e.message}[/red]")
                continue
            media_type = "image" if mime_type.startswith("image/") else "document"
            if mime_type.startswith("audio/"):
                media_type = "audio"
            attachment = (uri, media_type, path.name)
            console.print(f"[green]✓[/green] Attached {path.name}")
            continue

        if command.startswith("/summarize "):
            reply = session.summarize_text(command[len("/summarize "):])
        elif attachment is not None:
            uri, media_type, file_name = attachment
            reply = session.send(text, media_data_uri=uri, media_type=media_type, file_name=file_name)
            attachment = None
        else:
            reply = session.send(text)

        if reply is not None:
            console.print("[bold magenta]Nuvia:[/bold magenta]")
            console.print(Markdown(reply.text))
            console.print()


@app.command()
def ask(
    question: str = typer.Argument(..., help="The question to answer"),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Text to answer from",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Document to answer from (PDF, DOCX or text)",
    ),
) -> None:
    """
    Answer a question using only the given text or document.

    Example:
        nuvia ask "What is osmosis?" -f biology_notes.pdf
    """
    question_input = build_input(
        AnswerQuestionInput,
        user_question=question,
        context_text=context,
        document_data_uri=read_data_uri(file) if file else None,
        file_name=file.name if file else None,
    )
    output = run_with_spinner("Answering", answer_question_from_text, question_input)
    console.print(Panel(Markdown(output.answer), title="Answer", border_style="green"))


@app.command()
def quiz(
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Document to build the quiz from",
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        "-t",
        help="Text to build the quiz from",
    ),
    export: Optional[str] = typer.Option(
        None,
        "--export",
        "-o",
        help="Export the quiz to DOCX under this base name",
    ),
    with_answers: bool = typer.Option(
        False,
        "--with-answers/--no-answers",
        help="Show answers (and include them in the export)",
    ),
) -> None:
    """
    Generate a summary and up to five questions from text or a document.

    Example:
        nuvia quiz -f chapter3.pdf -o chapter3_quiz
    """
    if not file and not text:
        console.print("[red]Error:[/red] Provide --file or --text.", style="bold")
        raise typer.Exit(code=1)

    quiz_input = build_input(
        QuizFromTextInput,
        text_content=text,
        document_data_uri=read_data_uri(file) if file else None,
        file_name=file.name if file else None,
    )
    output = run_with_spinner("Generating quiz", generate_quiz_from_text, quiz_input)

    console.print(Panel(output.summary, title="Summary", border_style="cyan"))
    table = Table(title="Quiz", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("Question", style="white")
    if with_answers:
        table.add_column("Answer", style="green")

    for i, question in enumerate(output.questions, 1):
        row = [str(i), question.question_type.value, question.question_text]
        if question.options:
            row[2] += "\n" + "\n".join(f"  • {opt}" for opt in question.options)
        if with_answers:
            row.append(question.answer_text)
        table.add_row(*row)

    console.print()
    console.print(table)

    if export:
        try:
            path = export_quiz_to_docx(
                output,
                export,
                include_answers=with_answers,
                output_dir=get_settings().default_output_dir,
            )
        except OSError as e:
            fail(e)
        console.print(f"\n[green]✓[/green] Quiz exported to: {path}")


@app.command()
def notes(
    file: Path = typer.Argument(..., help="Document to take notes from (PDF, DOCX or text)"),
    export: Optional[str] = typer.Option(
        None,
        "--export",
        "-o",
        help="Export the notes to DOCX under this base name",
    ),
    with_answers: bool = typer.Option(
        False,
        "--with-answers/--answer-key",
        help="Mark answers inline vs append an answer key",
    ),
) -> None:
    """
    Generate smart notes (summary, key concepts, MCQs, flashcards) from a document.

    Example:
        nuvia notes lecture.pdf -o lecture_notes
    """
    notes_input = build_input(SmartNotesInput, document_data_uri=read_data_uri(file), file_name=file.name)
    output = run_with_spinner("Generating notes", generate_smart_notes, notes_input)
    display_notes(output, with_answers)
    if export:
        export_notes(output, export, file.stem, with_answers)


@app.command()
def transcript(
    file: Path = typer.Argument(..., help="Text file holding the video transcript"),
    title: Optional[str] = typer.Option(None, "--title", help="Title of the video"),
    export: Optional[str] = typer.Option(
        None,
        "--export",
        "-o",
        help="Export the notes to DOCX under this base name",
    ),
) -> None:
    """Generate study notes from a video transcript."""
    try:
        text = file.read_text(encoding="utf-8")
    except OSError as e:
        fail(e)

    notes_input = build_input(TranscriptNotesInput, transcript=text, video_title=title)
    output = run_with_spinner(
        "Generating notes from transcript", generate_notes_from_transcript, notes_input
    )
    display_notes(output, with_answers=False)
    if export:
        export_notes(output, export, title or file.stem, with_answers=False)


@app.command()
def summarize(
    file: Path = typer.Argument(..., help="Document to summarize"),
) -> None:
    """Summarize a document."""
    summary_input = build_input(SummarizeDocumentInput, document_data_uri=read_data_uri(file))
    output = run_with_spinner("Summarizing", summarize_document, summary_input)
    console.print(Panel(Markdown(output.summary), title=file.name, border_style="cyan"))


@app.command()
def analyze(
    image: Path = typer.Argument(..., help="Image to analyze"),
) -> None:
    """Describe an image and solve any problem it shows."""
    image_input = build_input(AnalyzeImageInput, photo_data_uri=read_data_uri(image))
    output = run_with_spinner("Analyzing image", analyze_image, image_input)
    console.print(Panel(Markdown(output.analysis_results), title=image.name, border_style="cyan"))


@app.command()
def tasks(
    request: str = typer.Argument(..., help="What you need to get done"),
    profile: Optional[str] = typer.Option(None, "--profile", help="Your goals and context"),
    current_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Current date (defaults to today)",
    ),
) -> None:
    """
    Break a request into scheduled tasks.

    Example:
        nuvia tasks "Write a 10-page research paper in 7 days"
    """
    task_input = build_input(
        SmartTaskInput,
        request=request,
        user_profile=profile,
        current_date=current_date or today(),
    )
    result = run_with_spinner("Planning tasks", smart_task_creation, task_input)

    if not result:
        console.print("[yellow]No tasks were generated. Try rephrasing your request.[/yellow]")
        return

    table = Table(title="Smart Tasks", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Task", style="white")
    table.add_column("Deadline", style="yellow")
    for i, task in enumerate(result, 1):
        table.add_row(str(i), task.task, task.deadline)

    console.print()
    console.print(table)


@app.command()
def plan(
    topic: str = typer.Argument(..., help="Assignment topic or title"),
    deadline: str = typer.Option(..., "--deadline", "-d", help="Final deadline"),
    current_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Current date (defaults to today)",
    ),
    raw: bool = typer.Option(False, "--raw", help="Print the Markdown plan as-is"),
) -> None:
    """
    Create a checklist plan for an assignment.

    Example:
        nuvia plan "Climate change essay" -d "November 30, 2024"
    """
    plan_input = build_input(
        AssignmentPlanInput,
        assignment_topic=topic,
        deadline=deadline,
        current_date=current_date or today(),
    )
    output = run_with_spinner("Planning assignment", generate_assignment_plan, plan_input)

    if raw:
        console.print(output.plan)
        return

    items = parse_plan(output.plan)
    for item in items:
        if item.type == "h2":
            console.print(f"\n[bold cyan]{item.text}[/bold cyan]")
        elif item.type == "h3":
            console.print(f"\n[bold]{item.text}[/bold]")
        elif item.type == "bold":
            console.print(f"[yellow]{item.text}[/yellow]")
        elif item.type == "task":
            box = "[green]☑[/green]" if item.completed else "☐"
            console.print(f"  {box} {item.text}")
        elif item.type == "separator":
            console.rule(style="dim")
        elif item.text:
            console.print(item.text)

    done, total = progress(items)
    console.print(f"\n[bold]Progress:[/bold] {done}/{total} tasks complete")


@app.command()
def riddle() -> None:
    """Play the riddle game. Leave the answer empty to give up, type 'q' to quit."""
    game = RiddleGame()
    console.print(Panel("Solve riddles to build your score!", title="Riddle Me This", border_style="magenta"))

    while True:
        current = game.next_riddle()
        console.print(f"\n[dim]({current.difficulty})[/dim] [bold]{current.question}[/bold]")
        try:
            answer = console.input("[cyan]Your answer:[/cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if answer.strip().lower() == "q":
            break
        if not answer.strip():
            console.print(f"[yellow]The answer was: {current.answer}[/yellow]")
        else:
            correct, message = game.submit(answer)
            console.print(f"[green]{message}[/green]" if correct else f"[red]{message}[/red]")
        console.print(f"[bold]Score:[/bold] {game.score}")

    console.print(f"\n[bold]Final score:[/bold] {game.score}")


@app.command()
def routine(
    routine_id: Optional[str] = typer.Argument(None, help="Routine to show (omit to list all)"),
) -> None:
    """List routine templates or show the steps of one."""
    if routine_id is None:
        table = Table(title="Routine Templates", border_style="cyan")
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Steps", style="white")
        table.add_column("Total", style="yellow")
        for template in ROUTINE_TEMPLATES:
            table.add_row(
                template.id,
                template.name,
                str(len(template.tasks)),
                format_time(template.total_duration),
            )
        console.print(table)
        return

    try:
        selected = get_routine(routine_id)
    except KeyError as e:
        fail(e)

    table = Table(title=selected.name, border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Step", style="white")
    table.add_column("Duration", style="yellow")
    for i, step in enumerate(selected.tasks, 1):
        table.add_row(str(i), step.name, format_time(step.duration))
    table.add_row("", "[bold]Total[/bold]", f"[bold]{format_time(selected.total_duration)}[/bold]")
    console.print(table)


@app.command()
def info() -> None:
    """Display information about Nuvia and the configured model."""
    settings = get_settings()
    model = settings.anthropic_model_name if settings.llm_provider == "anthropic" else settings.model_name
    info_text = f"""
[bold cyan]Nuvia AI Study Assistant[/bold cyan]
Version: {__version__}

[bold]Features:[/bold]
  • Chat with image and document attachments
  • Smart notes with MCQs and flashcards
  • Quizzes and Q&A from text or documents
  • Smart task and assignment planning
  • Riddle game and routine templates
  • DOCX export

[bold]Provider:[/bold] {settings.llm_provider}
[bold]Model:[/bold] {model}
    """
    console.print(Panel(info_text, title="Nuvia Info", border_style="cyan"))


def display_notes(output: StudyNotes, with_answers: bool) -> None:
    """Display generated notes."""
    console.print(Panel(Markdown(output.summary), title="Summary", border_style="cyan"))

    if output.key_concepts:
        console.print("\n[bold]Key Concepts[/bold]")
        for concept in output.key_concepts:
            console.print(f"  • {concept}")

    if output.mcqs:
        console.print("\n[bold]Multiple Choice Questions[/bold]")
        for i, mcq in enumerate(output.mcqs, 1):
            console.print(f"\n[cyan]Q{i}.[/cyan] {mcq.question}")
            for letter, option in zip("ABCD", mcq.options):
                mark = " [green]✓[/green]" if with_answers and option == mcq.correct_answer else ""
                console.print(f"    {letter}. {option}{mark}")

    if output.flashcards:
        table = Table(title="Flashcards", border_style="magenta")
        table.add_column("Term", style="cyan")
        table.add_column("Definition", style="white")
        for card in output.flashcards:
            table.add_row(card.term, card.definition)
        console.print()
        console.print(table)


def export_notes(output: StudyNotes, base_name: str, title: str, with_answers: bool) -> None:
    """Export notes to DOCX and report the path."""
    try:
        path = export_notes_to_docx(
            output,
            base_name,
            title=f"Study Notes: {title}",
            include_answers=with_answers,
            output_dir=get_settings().default_output_dir,
        )
    except OSError as e:
        fail(e)
    console.print(f"\n[green]✓[/green] Notes exported to: {path}")


@app.callback()
def callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL from the environment)",
    ),
) -> None:
    """
    Nuvia - AI study assistant.
    """
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_dir)


if __name__ == "__main__":
    app()
