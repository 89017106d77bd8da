"""Catalog Commands - Browse subjects and chapters."""

import typer

from revision_platform.cli.client import get_api_client
from revision_platform.cli.ui.display import (
    console,
    display_chapters_table,
    display_error,
    display_subjects_table,
)
from revision_platform.shared.exceptions import ApiClientError


def subjects() -> None:
    """List the available subjects."""
    try:
        with get_api_client() as client:
            items = client.list_subjects()
    except ApiClientError as e:
        display_error(e.reason)
        raise typer.Exit(1)

    if not items:
        console.print("[yellow]No subjects available.[/yellow]")
        return

    display_subjects_table(items)


def chapters(
    subject_id: str = typer.Argument(..., help="Subject id, e.g. physics"),
) -> None:
    """List the chapters of a subject."""
    try:
        with get_api_client() as client:
            subject = client.get_subject(subject_id)
            items = client.list_chapters(subject_id)
    except ApiClientError as e:
        display_error(e.reason)
        raise typer.Exit(1)

    display_chapters_table(f"{subject.icon} {subject.name}", items)
