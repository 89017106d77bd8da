"""CLI Entry Point - Main command interface.

This module provides the main entry point for the revision platform CLI.
The wizard and catalog commands talk to the API over HTTP; ``serve`` runs
the API itself.
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from revision_platform import __version__
from revision_platform.cli.commands.catalog import chapters, subjects
from revision_platform.cli.commands.study import generate, start

# Main application
app = typer.Typer(
    name="revision-platform",
    help="Revision Platform - AI-powered revision notes, practice questions and chat",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)
console = Console()


app.command("start")(start)
app.command("generate")(generate)
app.command("subjects")(subjects)
app.command("chapters")(chapters)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the revision platform API server."""
    import uvicorn

    from revision_platform.shared.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "revision_platform.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def version_callback(value: bool) -> None:
    if value:
        console.print(f"revision-platform {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Revision Platform - pick a mode, a subject and a chapter, then study."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
