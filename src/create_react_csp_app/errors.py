"""
create_react_csp_app.errors - Exception Hierarchy
=================================================

Every failure the scaffolder raises on purpose derives from ``ScaffoldError``
so the CLI can report it with a single handler.

    ScaffoldError
    ├── ProjectNameError (ValueError)    - interactive name rejected
    ├── InputAborted                     - prompt cancelled or input closed
    ├── SubprocessFailure                - external tool failed
    └── FileSystemError (OSError)
        ├── ConfigFileMissing            - file to delete is not there
        ├── ManifestError                - package.json unreadable
        └── ProjectDirectoryNotEmpty     - target already has content
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from create_react_csp_app.models import CommandResult


class ScaffoldError(Exception):
    """Base class for all scaffolder errors."""


class ProjectNameError(ScaffoldError, ValueError):
    """An interactively entered project name was rejected."""


class InputAborted(ScaffoldError):
    """The prompt sequence ended before every question was answered."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"No answer received for '{question}'. Aborting.")


class SubprocessFailure(ScaffoldError):
    """
    An external tool exited with a non-zero status or could not be started.

    Attributes
    ----------
    result : CommandResult | None
        The captured result, or None when the executable was not found.
    """

    def __init__(self, message: str, result: CommandResult | None = None) -> None:
        self.result = result
        super().__init__(message)


class FileSystemError(ScaffoldError, OSError):
    """A file the scaffolder depends on is missing or cannot be used."""


class ConfigFileMissing(FileSystemError):
    """A configuration file expected from the base template does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Expected '{path.name}' in {path.parent}, but it does not exist. "
            "The project template may have changed."
        )


class ManifestError(FileSystemError):
    """The project's package.json could not be read or parsed."""


class ProjectDirectoryNotEmpty(FileSystemError):
    """The target directory already exists and contains files."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Directory '{path}' already exists and is not empty. "
            "Use a different name or remove the existing directory."
        )
