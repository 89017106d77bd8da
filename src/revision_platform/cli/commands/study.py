"""Study Commands - Interactive wizard and one-shot generation.

Usage:
    revision-platform start
    revision-platform start --mode revision --subject physics --chapter kinematics
    revision-platform generate assessment chemistry atomic-structure --export quiz.html
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from revision_platform.cli.client import ApiClient, get_api_client
from revision_platform.cli.state import GeneratedContent, ResponseDisplay, WizardScreen
from revision_platform.cli.ui.display import (
    console,
    display_breadcrumb,
    display_chapters_table,
    display_content,
    display_error,
    display_message,
    display_messages,
    display_subjects_table,
    display_welcome,
    mode_option_label,
    spinner,
)
from revision_platform.cli.ui.formatting import render_html_document
from revision_platform.cli.ui.prompts import ask_text, confirm_action, create_menu, select_from_list
from revision_platform.cli.wizard import Wizard
from revision_platform.modules.content import initial_request
from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.exceptions import ApiClientError
from revision_platform.shared.models import LearningMode

logger = logging.getLogger(__name__)

MODES = list(LearningMode)
NAVIGATION_OPTIONS = [("b", "Back"), ("h", "Home"), ("q", "Quit")]
CHAT_COMMANDS = "/content to view notes, /back, /new, /quit"


def parse_mode_option(value: str) -> LearningMode:
    try:
        return LearningMode.parse(value)
    except ValueError:
        raise typer.BadParameter(
            f"Unknown mode '{value}'. Choose one of: {', '.join(LearningMode.values())}"
        )


def content_title(mode: LearningMode, subject: Subject, chapter: Chapter) -> str:
    return f"{mode.label}: {chapter.name} ({subject.name})"


def export_content(path: Path, title: str, content: str) -> None:
    """Write content to a standalone HTML file."""
    path.write_text(render_html_document(title, content), encoding="utf-8")
    console.print(f"[green]Exported to {path}[/green]")


# =============================================================================
# Interactive wizard
# =============================================================================

def preselect(
    wizard: Wizard,
    client: ApiClient,
    mode: Optional[str],
    subject_id: Optional[str],
    chapter_id: Optional[str],
) -> None:
    """Apply selections given on the command line.

    Raises:
        typer.BadParameter: If a selection is given without its prerequisite
        ApiClientError: If a subject or chapter cannot be fetched
    """
    if subject_id and not mode:
        raise typer.BadParameter("--subject requires --mode")
    if chapter_id and not subject_id:
        raise typer.BadParameter("--chapter requires --subject")

    if mode:
        wizard.choose_mode(parse_mode_option(mode))
    if subject_id:
        wizard.choose_subject(client.get_subject(subject_id))
    if chapter_id:
        wizard.choose_chapter(client.get_chapter(subject_id, chapter_id))


def mode_screen(wizard: Wizard) -> bool:
    options = [(str(i), mode_option_label(mode)) for i, mode in enumerate(MODES, 1)]
    options.append(("q", "Quit"))

    choice = create_menu("Choose Your Learning Mode", options)
    if choice == "q":
        return False

    wizard.choose_mode(MODES[int(choice) - 1])
    return True


def handle_navigation(wizard: Wizard, choice: str) -> bool:
    """Apply a back/home/quit choice. Returns False on quit."""
    if choice == "q":
        return False
    if choice == "b":
        wizard.back()
    elif choice == "h":
        wizard.home()
    return True


def subject_screen(wizard: Wizard) -> bool:
    display_breadcrumb(wizard.context)
    try:
        with spinner("Loading subjects..."):
            subjects = wizard.load_subjects()
    except ApiClientError as e:
        logger.error(f"Error fetching subjects: {e}")
        display_error(e.reason)
        subjects = []

    if subjects:
        display_subjects_table(subjects)

    choice = select_from_list(
        [f"{subject.icon} {subject.name}" for subject in subjects],
        title="Select Your Subject",
        extra_options=NAVIGATION_OPTIONS,
    )
    if not choice.isdigit():
        return handle_navigation(wizard, choice)

    wizard.choose_subject(subjects[int(choice) - 1])
    return True


def chapter_screen(wizard: Wizard) -> bool:
    display_breadcrumb(wizard.context)
    try:
        with spinner("Loading chapters..."):
            chapters = wizard.load_chapters()
    except ApiClientError as e:
        logger.error(f"Error fetching chapters: {e}")
        display_error(e.reason)
        chapters = []

    if chapters:
        display_chapters_table(wizard.context.subject.name, chapters)

    choice = select_from_list(
        [chapter.name for chapter in chapters],
        title="Select a Chapter",
        extra_options=NAVIGATION_OPTIONS,
    )
    if not choice.isdigit():
        return handle_navigation(wizard, choice)

    wizard.choose_chapter(chapters[int(choice) - 1])
    return True


def chat_loop(wizard: Wizard) -> bool:
    """Read chat messages until a slash command leaves the chat view."""
    display_messages(wizard.messages)
    console.print(f"[dim]Type a question, or {CHAT_COMMANDS}.[/dim]")

    while True:
        text = ask_text("\n[bold]You[/bold]").strip()
        command = text.lower()

        if command == "/quit":
            return False
        if command == "/content":
            wizard.toggle_display()
            return True
        if command == "/back":
            wizard.back()
            return True
        if command == "/new":
            wizard.new_session()
            return True

        with spinner("Thinking..."):
            reply = wizard.send_message(text)
        if reply is not None:
            display_message(reply)


def response_screen(wizard: Wizard) -> bool:
    context = wizard.context
    display_breadcrumb(context)

    with spinner(f"Preparing {context.mode.label.lower()} content..."):
        result = wizard.load_content()

    if wizard.display == ResponseDisplay.CHAT:
        return chat_loop(wizard)

    title = content_title(context.mode, context.subject, context.chapter)
    display_content(title, result)

    choice = create_menu(
        "What next?",
        [
            ("c", "💬 Have a question? Start chatting"),
            ("e", "Export to HTML"),
            ("b", "Back to chapters"),
            ("n", "Start new session"),
            ("q", "Quit"),
        ],
    )
    if choice == "q":
        return False
    if choice == "c":
        wizard.toggle_display()
    elif choice == "e":
        export_interactive(context.subject, context.chapter, context.mode, result)
    elif choice == "b":
        wizard.back()
    elif choice == "n":
        wizard.new_session()
    return True


def export_interactive(
    subject: Subject, chapter: Chapter, mode: LearningMode, result: GeneratedContent
) -> None:
    if result.error:
        display_error("There is no content to export.")
        return

    path = Path(ask_text("File name", default=f"{subject.id}-{chapter.id}-{mode.value}.html"))
    if path.exists() and not confirm_action(f"{path} exists. Overwrite?", default=False):
        return
    export_content(path, content_title(mode, subject, chapter), result.content)


SCREEN_HANDLERS = {
    WizardScreen.MODE_SELECT: mode_screen,
    WizardScreen.SUBJECT_SELECT: subject_screen,
    WizardScreen.CHAPTER_SELECT: chapter_screen,
    WizardScreen.RESPONSE_VIEW: response_screen,
}


def run_wizard(wizard: Wizard) -> None:
    """Drive the wizard until the user quits."""
    display_welcome()
    try:
        while SCREEN_HANDLERS[wizard.screen](wizard):
            pass
    except (KeyboardInterrupt, EOFError):
        console.print()
    console.print("[dim]Goodbye! Keep revising.[/dim]")


def start(
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Learning mode: revision, assessment or chat"
    ),
    subject: Optional[str] = typer.Option(None, "--subject", "-s", help="Subject id"),
    chapter: Optional[str] = typer.Option(None, "--chapter", "-c", help="Chapter id"),
) -> None:
    """Start the interactive revision wizard."""
    with get_api_client() as client:
        wizard = Wizard(client)
        try:
            preselect(wizard, client, mode, subject, chapter)
        except ApiClientError as e:
            display_error(e.reason)
            raise typer.Exit(1)
        run_wizard(wizard)


# =============================================================================
# One-shot generation
# =============================================================================

def generate(
    mode: str = typer.Argument(..., help="Learning mode: revision, assessment or chat"),
    subject_id: str = typer.Argument(..., help="Subject id, e.g. physics"),
    chapter_id: str = typer.Argument(..., help="Chapter id, e.g. kinematics"),
    export: Optional[Path] = typer.Option(
        None, "--export", "-e", help="Also write the content to an HTML file"
    ),
) -> None:
    """Generate content for one chapter and print it."""
    learning_mode = parse_mode_option(mode)

    try:
        with get_api_client() as client:
            subject = client.get_subject(subject_id)
            chapter = client.get_chapter(subject_id, chapter_id)
            with spinner("Generating content..."):
                text = client.generate(
                    learning_mode,
                    subject.name,
                    chapter.name,
                    request=initial_request(learning_mode, subject.name, chapter.name),
                )
    except ApiClientError as e:
        display_error(e.reason)
        raise typer.Exit(1)

    title = content_title(learning_mode, subject, chapter)
    display_content(title, GeneratedContent(content=text))

    if export is not None:
        export_content(export, title, text)
