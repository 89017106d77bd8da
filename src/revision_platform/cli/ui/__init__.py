"""CLI UI Components - Rich prompts, displays and content formatting."""

from revision_platform.cli.ui.formatting import format_content, render_html_document
from revision_platform.cli.ui.prompts import ask_text, confirm_action, create_menu, select_from_list

__all__ = [
    "ask_text",
    "confirm_action",
    "create_menu",
    "format_content",
    "render_html_document",
    "select_from_list",
]
