"""
create_react_csp_app.runner - External Tool Invocation
======================================================

Runs the package manager and tool initializers as child processes.

Output is captured rather than shown, and stdin is closed so a tool that
decides to ask a question fails instead of waiting on a prompt the user
cannot see. Arguments are passed as a list, never through a shell.
"""

from __future__ import annotations

import shutil
import subprocess
from typing import TYPE_CHECKING

from create_react_csp_app.errors import SubprocessFailure
from create_react_csp_app.models import CommandInvocation, CommandResult


if TYPE_CHECKING:
    from collections.abc import Callable

    # A runner takes an invocation and returns its result, raising
    # SubprocessFailure on error. Tests substitute their own.
    CommandRunner = Callable[[CommandInvocation], CommandResult]


# Number of stderr lines kept in error messages
STDERR_TAIL_LINES = 20


def resolve_executable(program: str) -> str:
    """
    Find the full path of ``program`` on PATH.

    On Windows ``npm`` and ``npx`` are ``.cmd`` shims that
    ``subprocess`` cannot start by bare name; ``shutil.which`` finds them.
    Falls back to ``program`` unchanged so the OS reports the miss.
    """
    return shutil.which(program) or program


def stderr_tail(text: str, lines: int = STDERR_TAIL_LINES) -> str:
    """Return the last ``lines`` non-empty lines of ``text``."""
    kept = [line for line in text.splitlines() if line.strip()]
    return "\n".join(kept[-lines:])


def run_command(invocation: CommandInvocation) -> CommandResult:
    """
    Run an external tool and wait for it to finish.

    Parameters
    ----------
    invocation : CommandInvocation
        Program, arguments and working directory.

    Returns
    -------
    CommandResult
        The result of a successful (exit status 0) run.

    Raises
    ------
    SubprocessFailure
        If the program cannot be found or exits with a non-zero status.
    """
    args = [resolve_executable(invocation.args[0]), *invocation.args[1:]]

    try:
        completed = subprocess.run(
            args,
            cwd=invocation.cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        msg = f"Could not run '{invocation.display}': {invocation.args[0]} was not found."
        raise SubprocessFailure(msg) from e

    result = CommandResult(
        invocation=invocation,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )

    if not result.ok:
        msg = f"'{invocation.display}' failed with exit code {result.returncode}"
        detail = stderr_tail(result.stderr) or stderr_tail(result.stdout)
        if detail:
            msg = f"{msg}:\n{detail}"
        raise SubprocessFailure(msg, result=result)

    return result
