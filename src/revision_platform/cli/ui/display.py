"""Display Utilities - Rich output formatting."""

from contextlib import contextmanager
from typing import Iterator, Sequence

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from revision_platform.cli.state import GeneratedContent, Message, SessionContext
from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.models import LearningMode, MessageRole

console = Console()

MODE_DESCRIPTIONS = {
    LearningMode.REVISION: "Quick review of key concepts and formulas",
    LearningMode.ASSESSMENT: "Test your knowledge with practice questions",
    LearningMode.CHAT: "Interactive Q&A with your AI tutor",
}

MODE_ICONS = {
    LearningMode.REVISION: "🚀",
    LearningMode.ASSESSMENT: "📝",
    LearningMode.CHAT: "💬",
}

DIFFICULTY_COLORS = {"easy": "green", "medium": "yellow", "hard": "red"}


def mode_option_label(mode: LearningMode) -> str:
    return f"{MODE_ICONS[mode]} {mode.label} - {MODE_DESCRIPTIONS[mode]}"


def display_welcome() -> None:
    console.print(Panel.fit(
        "[bold cyan]Revision Platform[/bold cyan]\n"
        "Pick a learning mode, a subject and a chapter to get started.",
        border_style="cyan",
    ))


def display_breadcrumb(context: SessionContext) -> None:
    """Show the selections made so far."""
    parts = ["Home"]
    if context.mode is not None:
        parts.append(context.mode.label)
    if context.subject is not None:
        parts.append(context.subject.name)
    if context.chapter is not None:
        parts.append(context.chapter.name)
    console.print(f"[dim]{' › '.join(parts)}[/dim]")


def display_subjects_table(subjects: Sequence[Subject]) -> None:
    """Display subjects in a formatted table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan")
    table.add_column("Subject", min_width=12)
    table.add_column("Chapters", justify="right")
    table.add_column("Description", min_width=30)

    for i, subject in enumerate(subjects, 1):
        table.add_row(
            str(i),
            subject.id,
            f"{subject.icon} {subject.name}",
            str(subject.chapter_count),
            subject.description,
        )

    console.print(table)


def display_chapters_table(subject_name: str, chapters: Sequence[Chapter]) -> None:
    """Display the chapters of one subject."""
    table = Table(
        title=f"[bold]{subject_name}[/bold]",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan")
    table.add_column("Chapter", min_width=15)
    table.add_column("Difficulty", width=10)
    table.add_column("Topics", justify="right")
    table.add_column("Description", min_width=30)

    for i, chapter in enumerate(chapters, 1):
        color = DIFFICULTY_COLORS.get(chapter.difficulty.lower(), "white")
        table.add_row(
            str(i),
            chapter.id,
            chapter.name,
            f"[{color}]{chapter.difficulty}[/{color}]",
            str(chapter.topic_count),
            chapter.description,
        )

    console.print(table)


def display_content(title: str, result: GeneratedContent) -> None:
    """Display generated content as rendered markdown."""
    if result.error:
        console.print(Panel(
            f"[red]{result.content}[/red]",
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
        ))
        return

    console.print(Panel(
        Markdown(result.content),
        title=f"[bold blue]{title}[/bold blue]",
        border_style="blue",
    ))


def display_message(message: Message) -> None:
    """Display one chat message."""
    time = message.timestamp.strftime("%H:%M:%S")
    if message.role == MessageRole.USER:
        console.print(f"\n[bold green]You[/bold green] [dim]{time}[/dim]")
        console.print(message.content)
        return

    style = "red" if message.error else "blue"
    console.print(Panel(
        Markdown(message.content),
        title=f"[bold {style}]Tutor[/bold {style}] [dim]{time}[/dim]",
        title_align="left",
        border_style=style,
    ))


def display_messages(messages: Sequence[Message]) -> None:
    if not messages:
        console.print("[dim]No messages yet. Ask a question about this chapter.[/dim]")
        return
    for message in messages:
        display_message(message)


def display_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")


@contextmanager
def spinner(description: str) -> Iterator[None]:
    """Show a transient spinner while a request is in flight."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description=description, total=None)
        yield
