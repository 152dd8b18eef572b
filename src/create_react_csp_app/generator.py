"""
create_react_csp_app.generator - Project Materialization
========================================================

This module executes a ``ResolutionPlan`` against the filesystem. It is the
only place that creates directories, writes files and starts the external
tools.

Pipeline
--------
The steps always run in this order, and the first failure stops the run:

    1. Create the project directory (refused if it exists and is not empty)
    2. Run the base template generator from the parent directory
    3. Write config files and delete replaced template files
    4. Install development dependencies (one command, if any)
    5. Install dependencies (one command, if any)
    6. Run tool initializers and write the files that follow them
    7. Patch the scripts table of package.json

Every command after step 2 runs with the project directory as its working
directory. Nothing is rolled back on failure: files created before the
error stay where they are.

Usage Example
-------------
>>> from create_react_csp_app.generator import create_project
>>> from create_react_csp_app.models import AnswerRecord, Linting
>>> result = create_project(AnswerRecord(project_name="demo", linting=Linting.BIOME))
>>> result.project_path
PosixPath('/current/dir/demo')
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from create_react_csp_app import reporter
from create_react_csp_app.errors import (
    ConfigFileMissing,
    ManifestError,
    ProjectDirectoryNotEmpty,
)
from create_react_csp_app.models import (
    AnswerRecord,
    CommandInvocation,
    FileDelete,
    FileWrite,
    ResolutionPlan,
    ScaffoldSettings,
    ScriptsPatch,
)
from create_react_csp_app.resolver import install_command, resolve_options
from create_react_csp_app.runner import run_command


if TYPE_CHECKING:
    from create_react_csp_app.models import CommandResult
    from create_react_csp_app.runner import CommandRunner


MANIFEST_FILE = "package.json"


# =============================================================================
# Result Data Class
# =============================================================================

@dataclass
class GenerationResult:
    """
    Outcome of a project generation run.

    Attributes
    ----------
    project_path : Path
        Absolute path of the project directory.

    plan : ResolutionPlan
        The plan that was executed.

    commands : list[CommandResult]
        Results of every external tool run, in order.

    files_written : list[Path]
        Files written by the scaffolder itself (package.json included).

    files_removed : list[Path]
        Template files deleted.
    """

    project_path: Path
    plan: ResolutionPlan
    commands: list[CommandResult] = field(default_factory=list)
    files_written: list[Path] = field(default_factory=list)
    files_removed: list[Path] = field(default_factory=list)


# =============================================================================
# Directory Preparation
# =============================================================================

def prepare_project_directory(project_path: Path) -> Path:
    """
    Create the project directory, refusing to reuse one with content.

    An existing empty directory is accepted.

    Raises
    ------
    ProjectDirectoryNotEmpty
        If the directory exists and contains anything.
    NotADirectoryError
        If the path exists and is a file.
    """
    if project_path.exists():
        if not project_path.is_dir():
            raise NotADirectoryError(f"'{project_path}' exists and is not a directory.")
        if any(project_path.iterdir()):
            raise ProjectDirectoryNotEmpty(project_path)

    project_path.mkdir(parents=True, exist_ok=True)
    return project_path


# =============================================================================
# File Directives
# =============================================================================

def write_files(project_path: Path, files: tuple[FileWrite, ...]) -> list[Path]:
    """
    Write each file relative to ``project_path``, overwriting existing ones.

    Returns
    -------
    list[Path]
        Absolute paths written, in order.
    """
    written: list[Path] = []
    for directive in files:
        full_path = project_path / directive.path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(directive.content, encoding="utf-8")
        written.append(full_path)
    return written


def remove_files(project_path: Path, files: tuple[FileDelete, ...]) -> list[Path]:
    """
    Delete each file relative to ``project_path``.

    Raises
    ------
    ConfigFileMissing
        If a file is not there. A missing file means the base template is
        not the one the plan was made for.
    """
    removed: list[Path] = []
    for directive in files:
        full_path = project_path / directive.path
        try:
            full_path.unlink()
        except FileNotFoundError as e:
            raise ConfigFileMissing(full_path) from e
        removed.append(full_path)
    return removed


# =============================================================================
# Manifest
# =============================================================================

def update_manifest_scripts(project_path: Path, patch: ScriptsPatch) -> Path:
    """
    Apply ``patch`` to the scripts table of the project's package.json.

    The rest of the manifest is kept as parsed, in its original key order,
    and the file is rewritten with 2-space indentation.

    Parameters
    ----------
    project_path : Path
        Project root containing package.json.

    patch : ScriptsPatch
        Scripts to set and remove.

    Returns
    -------
    Path
        Path of the rewritten manifest.

    Raises
    ------
    ManifestError
        If package.json is missing or is not valid JSON, or if it or its
        scripts table is not an object.
    """
    manifest_path = project_path / MANIFEST_FILE

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"No {MANIFEST_FILE} found in {project_path}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid {MANIFEST_FILE} in {project_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise ManifestError(f"{MANIFEST_FILE} in {project_path} is not a JSON object")

    scripts = manifest.get("scripts") or {}
    if not isinstance(scripts, dict):
        raise ManifestError(f"'scripts' in {MANIFEST_FILE} is not a JSON object")
    manifest["scripts"] = patch.apply(scripts)

    manifest_path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return manifest_path


# =============================================================================
# Main Generation Function
# =============================================================================

def create_project(
    answers: AnswerRecord,
    *,
    output_dir: Path | None = None,
    settings: ScaffoldSettings | None = None,
    runner: CommandRunner = run_command,
    verbose: bool = True,
) -> GenerationResult:
    """
    Create a new React project for the given answers.

    Parameters
    ----------
    answers : AnswerRecord
        Completed answers.

    output_dir : Path | None
        Directory the project is created in. Defaults to the current
        working directory.

    settings : ScaffoldSettings | None
        Tool names and pinned versions. Defaults are used if None.

    runner : CommandRunner
        Runs external tools. Must raise ``SubprocessFailure`` on error.

    verbose : bool, default=True
        Print progress and the success banner.

    Returns
    -------
    GenerationResult
        Paths and command results of the run.

    Raises
    ------
    ProjectDirectoryNotEmpty
        If the target directory already has content.
    SubprocessFailure
        If any external tool fails.
    ConfigFileMissing
        If a template file to delete does not exist.
    ManifestError
        If package.json cannot be read.
    """
    parent_dir = (output_dir or Path.cwd()).resolve()
    project_path = parent_dir / answers.project_name
    plan = resolve_options(answers, settings)
    settings = settings or ScaffoldSettings()

    result = GenerationResult(project_path=project_path, plan=plan)

    def run(invocation: CommandInvocation, cwd: Path) -> None:
        if verbose and invocation.description:
            reporter.print_step(invocation.description)
        result.commands.append(runner(invocation.in_directory(cwd)))

    if verbose:
        reporter.print_start(project_path)

    # Step 1: Project directory
    prepare_project_directory(project_path)

    # Step 2: Base template, generated from the parent directory
    run(plan.scaffold, parent_dir)

    # Step 3: Config files
    result.files_written.extend(write_files(project_path, plan.config_files))
    result.files_removed.extend(remove_files(project_path, plan.removed_files))

    # Steps 4-5: Packages
    if plan.packages.dev_dependencies:
        run(install_command(plan.packages.dev_dependencies, settings, dev=True), project_path)

    if plan.packages.dependencies:
        run(install_command(plan.packages.dependencies, settings), project_path)

    # Step 6: Tool initializers
    for step in plan.initializers:
        run(step.command, project_path)
        result.files_written.extend(write_files(project_path, step.files))

    # Step 7: Scripts
    result.files_written.append(update_manifest_scripts(project_path, plan.scripts))

    if verbose:
        for path in result.files_written:
            reporter.print_detail(f"Wrote {path.relative_to(project_path)}")
        for path in result.files_removed:
            reporter.print_detail(f"Removed {path.relative_to(project_path)}")
        reporter.print_success(answers.project_name, project_path)

    return result
