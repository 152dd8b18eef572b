"""
create_react_csp_app.models - Pydantic Models
=============================================

This module defines the data passed between the stages of the scaffolder:

    AnswerRecord          (prompts -> resolver)
    ├── Styling (enum)
    ├── Linting (enum)
    ├── Router (enum)
    └── ReactQuery (enum)

    ScaffoldSettings      (tool names and pinned versions)

    ResolutionPlan        (resolver -> generator)
    ├── DependencyPlan
    ├── FileWrite / FileDelete
    ├── InitializerStep
    │   └── CommandInvocation
    └── ScriptsPatch

    CommandResult         (runner -> generator)

Every model is frozen: once the prompt sequence or the resolver has built
one, nothing downstream can change it.

Usage Example
-------------
>>> from create_react_csp_app.models import AnswerRecord, Linting, Styling
>>> answers = AnswerRecord(
...     project_name="my-app",
...     styling=Styling.TAILWIND,
...     linting=Linting.BIOME,
... )
>>> answers.router
<Router.NONE: 'none'>
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enumerations
# =============================================================================

class Styling(str, Enum):
    """
    Styling solution for the generated project.

    Attributes
    ----------
    MUI : str
        Material-UI components with the Emotion styling engine.

    TAILWIND : str
        Tailwind CSS v3 with PostCSS and Autoprefixer.

    NONE : str
        Keep the plain CSS that ships with the Vite template.
    """

    MUI = "mui"
    TAILWIND = "tailwind"
    NONE = "none"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and summaries."""
        labels = {
            Styling.MUI: "Material-UI (MUI)",
            Styling.TAILWIND: "Tailwind CSS",
            Styling.NONE: "None",
        }
        return labels[self]


class Linting(str, Enum):
    """
    Linting and formatting setup for the generated project.

    Attributes
    ----------
    ESLINT_PRETTIER : str
        ESLint with the React plugins, formatted by Prettier.

    BIOME : str
        BiomeJS as a single lint + format tool. Replaces the ESLint
        config created by the Vite template.

    NONE : str
        No linting scripts at all.
    """

    ESLINT_PRETTIER = "eslintPrettier"
    BIOME = "biome"
    NONE = "none"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and summaries."""
        labels = {
            Linting.ESLINT_PRETTIER: "ESLint + Prettier",
            Linting.BIOME: "BiomeJS",
            Linting.NONE: "None",
        }
        return labels[self]


class Router(str, Enum):
    """
    Routing library choice.

    Note
    ----
    Recorded in the answers but not yet mapped to any package or file.
    """

    NONE = "none"
    REACT_ROUTER = "reactRouter"
    TANSTACK_ROUTER = "tanStackRouter"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and summaries."""
        labels = {
            Router.NONE: "None",
            Router.REACT_ROUTER: "React Router",
            Router.TANSTACK_ROUTER: "TanStack Router",
        }
        return labels[self]


class ReactQuery(str, Enum):
    """Whether to use React Query. Recorded but not yet mapped, like Router."""

    NO = "no"
    YES = "yes"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and summaries."""
        return "Yes" if self is ReactQuery.YES else "No"


# =============================================================================
# Answers
# =============================================================================

class AnswerRecord(BaseModel):
    """
    Answers collected by the prompt sequence.

    Attributes
    ----------
    project_name : str
        Directory name of the new project. Interactively entered names are
        validated and normalised by the prompt; a name given on the command
        line is used as is.

    styling : Styling
        Selected styling solution.

    linting : Linting
        Selected linting setup.

    router : Router
        Selected routing library.

    react_query : ReactQuery
        Whether React Query was requested.

    Examples
    --------
    >>> AnswerRecord(project_name="demo").styling
    <Styling.NONE: 'none'>
    """

    model_config = ConfigDict(frozen=True)

    project_name: Annotated[str, Field(
        description="Project directory name",
        min_length=1,
    )]
    styling: Styling = Field(
        default=Styling.NONE,
        description="Styling solution",
    )
    linting: Linting = Field(
        default=Linting.NONE,
        description="Linting setup",
    )
    router: Router = Field(
        default=Router.NONE,
        description="Routing library",
    )
    react_query: ReactQuery = Field(
        default=ReactQuery.NO,
        description="Use React Query",
    )

    @field_validator("project_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            msg = "Project name cannot be blank."
            raise ValueError(msg)
        return v

    def summary_rows(self) -> list[tuple[str, str]]:
        """
        Label/value pairs for the configuration summary table.

        Returns
        -------
        list[tuple[str, str]]
            One row per answer, in prompt order.
        """
        return [
            ("Name", self.project_name),
            ("Styling", self.styling.label),
            ("Linting", self.linting.label),
            ("Router", self.router.label),
            ("React Query", self.react_query.label),
        ]


# =============================================================================
# Settings
# =============================================================================

class ScaffoldSettings(BaseModel):
    """
    Names of the external tools and the versions pinned by the scaffolder.

    The defaults produce the exact commands the scaffolder is documented to
    run; overriding them is mostly useful for tests and mirrors.

    Attributes
    ----------
    package_manager : str
        Executable used for ``create`` and ``install``.

    package_runner : str
        Executable used to run package binaries (``tailwindcss``, ``biome``).

    scaffolder_package : str
        Package passed to ``<package_manager> create``.

    template : str
        Template identifier for the scaffolder (React + TypeScript + SWC).

    tailwind_version : str
        Tailwind CSS version installed when Tailwind is selected. Pinned to
        v3 because the generated config uses the v3 ``init`` workflow.
    """

    model_config = ConfigDict(frozen=True)

    package_manager: str = Field(default="npm", min_length=1)
    package_runner: str = Field(default="npx", min_length=1)
    scaffolder_package: str = Field(default="vite@latest", min_length=1)
    template: str = Field(default="react-swc-ts", min_length=1)
    tailwind_version: str = Field(default="3.4.17", pattern=r"^\d+\.\d+\.\d+$")


# =============================================================================
# Resolution Plan
# =============================================================================

class DependencyPlan(BaseModel):
    """
    Packages to install, in insertion order.

    Attributes
    ----------
    dependencies : tuple[str, ...]
        Runtime dependencies (``npm install``).

    dev_dependencies : tuple[str, ...]
        Development dependencies (``npm install --save-dev``).
    """

    model_config = ConfigDict(frozen=True)

    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()


class FileWrite(BaseModel):
    """Write ``content`` to ``path`` (relative to the project root)."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str


class FileDelete(BaseModel):
    """Delete ``path`` (relative to the project root). The file must exist."""

    model_config = ConfigDict(frozen=True)

    path: str


class CommandInvocation(BaseModel):
    """
    A request to run an external tool.

    Attributes
    ----------
    args : tuple[str, ...]
        Program followed by its arguments. Never passed through a shell.

    cwd : Path | None
        Working directory; None means "the project directory", filled in
        by the generator once it knows where the project lives.

    description : str
        Short text for progress and error messages.
    """

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...] = Field(min_length=1)
    cwd: Path | None = None
    description: str = ""

    @property
    def display(self) -> str:
        """The command as a user would type it."""
        return " ".join(self.args)

    def in_directory(self, cwd: Path) -> CommandInvocation:
        """Return a copy of this invocation bound to ``cwd``."""
        return self.model_copy(update={"cwd": cwd})


class CommandResult(BaseModel):
    """Outcome of a finished external tool run."""

    model_config = ConfigDict(frozen=True)

    invocation: CommandInvocation
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True if the tool exited with status 0."""
        return self.returncode == 0


class InitializerStep(BaseModel):
    """
    Run a tool's own ``init`` command, then overwrite some of its output.

    Attributes
    ----------
    command : CommandInvocation
        The initializer to run inside the project directory.

    files : tuple[FileWrite, ...]
        Files written after the command succeeds.
    """

    model_config = ConfigDict(frozen=True)

    command: CommandInvocation
    files: tuple[FileWrite, ...] = ()


class ScriptsPatch(BaseModel):
    """
    Changes to the ``scripts`` table of package.json.

    Keys in ``remove`` are dropped first, then ``updates`` is merged over the
    result. Every other script is left untouched.
    """

    model_config = ConfigDict(frozen=True)

    updates: dict[str, str] = Field(default_factory=dict)
    remove: tuple[str, ...] = ()

    def apply(self, scripts: dict[str, str]) -> dict[str, str]:
        """
        Return a new scripts table with this patch applied.

        Parameters
        ----------
        scripts : dict[str, str]
            The current table. Not modified.

        Returns
        -------
        dict[str, str]
            Patched table. Existing keys keep their position; new keys are
            appended in the order of ``updates``.
        """
        patched = {
            name: command
            for name, command in scripts.items()
            if name not in self.remove
        }
        patched.update(self.updates)
        return patched


class ResolutionPlan(BaseModel):
    """
    Everything the generator needs to do for one set of answers.

    Attributes
    ----------
    packages : DependencyPlan
        Packages to install.

    scaffold : CommandInvocation
        The base template generator, run from the parent directory.

    config_files : tuple[FileWrite, ...]
        Files written right after scaffolding.

    removed_files : tuple[FileDelete, ...]
        Template files deleted right after scaffolding.

    initializers : tuple[InitializerStep, ...]
        Tool initializers run after installation, in order.

    scripts : ScriptsPatch
        Changes to the package.json scripts table.
    """

    model_config = ConfigDict(frozen=True)

    packages: DependencyPlan = Field(default_factory=DependencyPlan)
    scaffold: CommandInvocation
    config_files: tuple[FileWrite, ...] = ()
    removed_files: tuple[FileDelete, ...] = ()
    initializers: tuple[InitializerStep, ...] = ()
    scripts: ScriptsPatch = Field(default_factory=ScriptsPatch)

    @property
    def written_paths(self) -> list[str]:
        """Relative paths of every file the plan writes, in write order."""
        paths = [f.path for f in self.config_files]
        for step in self.initializers:
            paths.extend(f.path for f in step.files)
        return paths
