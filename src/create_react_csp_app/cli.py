"""
create_react_csp_app.cli - Command Line Interface
=================================================

This module provides the command-line interface using Typer.

The application has a single command, so it is invoked without a
subcommand name:

    $ create-react-csp-app              # asks for the project name
    $ create-react-csp-app my-app       # uses my-app as the directory
    $ create-react-csp-app --version

Every error raised while prompting or generating ends up in one handler in
``main``, which prints it and exits with status 1.

See Also
--------
- prompts.py: The question sequence
- generator.py: Project creation
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.panel import Panel

from create_react_csp_app import __version__, reporter
from create_react_csp_app.generator import create_project
from create_react_csp_app.prompts import collect_answers


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="create-react-csp-app",
    help="Create a new React project with TypeScript, ESLint, and Prettier.",
    rich_markup_mode="rich",
    add_completion=False,
)


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """
    Display version information and exit.

    Parameters
    ----------
    value : bool
        True if --version was passed.
    """
    if value:
        reporter.console.print(Panel(
            f"[bold green]create-react-csp-app[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]React + TypeScript starter on Vite[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    project_directory: Annotated[
        str | None,
        typer.Argument(
            help="Project directory name",
            metavar="PROJECT_DIRECTORY",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create a new React client-side rendered app.

    Asks which styling solution, linting setup, router and data-fetching
    library to use, then scaffolds the project with [cyan]Vite[/] and
    installs the selected packages.

    [bold]Examples:[/]

        # Interactive mode (prompts for the name too)
        create-react-csp-app

        # Name the project directory up front
        create-react-csp-app my-app
    """
    try:
        answers = collect_answers(project_directory)
        reporter.print_summary(answers)
        create_project(answers)
    except Exception as e:
        reporter.print_error(e)
        raise typer.Exit(1) from e


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
