"""Prompt Utilities - Rich prompts and inputs."""

from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

console = Console()


def create_menu(
    title: str,
    options: List[Tuple[str, str]],
    prompt: str = "Select",
) -> str:
    """Create an interactive menu.

    Args:
        title: Menu title
        options: List of (key, description) tuples
        prompt: Prompt text

    Returns:
        Selected key
    """
    console.print(Panel.fit(f"[bold]{title}[/bold]", border_style="cyan"))

    for key, description in options:
        console.print(f"  \\[{key}] {description}")

    valid_keys = [opt[0].lower() for opt in options]

    while True:
        choice = Prompt.ask(f"\n{prompt}", console=console).strip().lower()
        if choice in valid_keys:
            return choice
        console.print(f"[red]Invalid choice. Please enter one of: {', '.join(valid_keys)}[/red]")


def select_from_list(
    items: Sequence[str],
    title: str = "Select an item",
    extra_options: Sequence[Tuple[str, str]] = (),
) -> str:
    """Let user pick a numbered item or one of the extra keyed options.

    Args:
        items: Items to choose from
        title: Title for the selection
        extra_options: (key, description) pairs offered after the items,
            e.g. back or home

    Returns:
        The 1-based item number as a string, or the chosen extra key
    """
    options = [(str(i), item) for i, item in enumerate(items, 1)]
    options.extend(extra_options)
    return create_menu(title, options, prompt="Selection")


def ask_text(prompt_text: str, default: Optional[str] = None) -> str:
    """Ask for a single line of free text."""
    if default is None:
        return Prompt.ask(prompt_text, console=console)
    return Prompt.ask(prompt_text, default=default, console=console)


def confirm_action(
    message: str,
    default: bool = True,
) -> bool:
    """Simple confirmation prompt.

    Args:
        message: Confirmation message
        default: Default value if user presses Enter

    Returns:
        True if confirmed, False otherwise
    """
    return Confirm.ask(message, default=default, console=console)
