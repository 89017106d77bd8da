"""CLI Module - Terminal wizard for the revision platform.

This module provides a rich interactive CLI built with Typer and Rich.

Usage:
    revision-platform --help            Show all commands
    revision-platform start             Run the mode/subject/chapter wizard
    revision-platform subjects          List subjects
    revision-platform chapters physics  List the chapters of a subject
    revision-platform serve             Run the API server
"""

from revision_platform.cli.main import app, main

__all__ = ["app", "main"]
