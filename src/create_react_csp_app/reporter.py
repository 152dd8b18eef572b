"""
create_react_csp_app.reporter - Console Output
==============================================

All user-facing output goes through the shared Rich console here. This
module formats; it makes no decisions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


if TYPE_CHECKING:
    from pathlib import Path

    from create_react_csp_app.models import AnswerRecord


# Console for rich output
console = Console()
error_console = Console(stderr=True)

# (command, explanation) pairs shown after a successful run
USAGE_HINTS: list[tuple[str, str]] = [
    ("npm run dev", "Starts the development server."),
    ("npm run build", "Bundles the app into static files for production."),
]


def print_summary(answers: AnswerRecord) -> None:
    """Print the collected answers as a two-column table."""
    table = Table(title="Project Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for label, value in answers.summary_rows():
        table.add_row(label, escape(value))

    console.print()
    console.print(table)
    console.print()


def print_start(project_path: Path) -> None:
    console.print(f"[blue]Creating a new React CSR app in {escape(str(project_path))}[/]")


def print_step(message: str) -> None:
    console.print(f"\n[blue]{message}...[/]")


def print_detail(message: str) -> None:
    console.print(f"  [dim]{message}[/]")


def print_success(project_name: str, project_path: Path) -> None:
    """
    Print the success banner followed by the usage hint.

    Parameters
    ----------
    project_name : str
        Name the project was created with.

    project_path : Path
        Absolute path of the project directory.
    """
    hints = "\n".join(
        f"  [cyan]{command}[/]\n    {explanation}"
        for command, explanation in USAGE_HINTS
    )
    name = escape(project_name)

    console.print()
    console.print(
        Panel(
            f"[bold green]Success![/] Created [green]{name}[/] at "
            f"{escape(str(project_path))}\n\n"
            f"[blue]Inside that directory, you can run several commands:[/]\n\n"
            f"{hints}\n\n"
            f"[bold]Next steps:[/]\n"
            f"  cd {name}\n"
            f"  npm run dev",
            title="[bold green]Success[/]",
            border_style="green",
        )
    )


def print_error(error: BaseException) -> None:
    """Print a labeled error line to stderr."""
    error_console.print(f"[bold red]Error:[/] {escape(str(error))}", highlight=False)
