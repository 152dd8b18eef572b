"""
pytest configuration and shared fixtures for create-react-csp-app tests.

Fixtures
--------
temp_dir : Path
    A temporary directory projects are created in.

vite_package_json : dict
    The package.json the Vite react-swc-ts template ships with.

fake_runner : FakeRunner
    Stand-in for ``run_command`` that records invocations and creates the
    files ``npm create vite`` would, without starting any process.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_react_csp_app.errors import SubprocessFailure
from create_react_csp_app.models import CommandInvocation, CommandResult


VITE_SCRIPTS = {
    "dev": "vite",
    "build": "tsc -b && vite build",
    "lint": "eslint .",
    "preview": "vite preview",
}


class FakeRunner:
    """
    Records every invocation and emulates the base template generator.

    Parameters
    ----------
    fail_on : str | None
        If an invocation's command line contains this text, raise
        SubprocessFailure instead of succeeding.

    eslint_config : bool
        Whether the emulated template includes eslint.config.js.
    """

    def __init__(self, fail_on: str | None = None, eslint_config: bool = True) -> None:
        self.calls: list[CommandInvocation] = []
        self.fail_on = fail_on
        self.eslint_config = eslint_config

    def __call__(self, invocation: CommandInvocation) -> CommandResult:
        self.calls.append(invocation)

        if self.fail_on and self.fail_on in invocation.display:
            result = CommandResult(invocation=invocation, returncode=1, stderr="boom")
            raise SubprocessFailure(f"'{invocation.display}' failed", result=result)

        if invocation.args[1] == "create":
            self._scaffold(Path(invocation.cwd) / invocation.args[3])

        return CommandResult(invocation=invocation, returncode=0)

    def _scaffold(self, project_path: Path) -> None:
        project_path.mkdir(parents=True, exist_ok=True)
        (project_path / "src").mkdir(exist_ok=True)
        (project_path / "src" / "index.css").write_text(":root {}\n")
        manifest = {
            "name": project_path.name,
            "private": True,
            "version": "0.0.0",
            "type": "module",
            "scripts": dict(VITE_SCRIPTS),
        }
        (project_path / "package.json").write_text(json.dumps(manifest, indent=2))
        if self.eslint_config:
            (project_path / "eslint.config.js").write_text("export default []\n")

    @property
    def commands(self) -> list[str]:
        """Command lines in call order."""
        return [call.display for call in self.calls]


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for test output."""
    return tmp_path


@pytest.fixture
def vite_package_json() -> dict:
    """Provide the package.json content of a fresh Vite project."""
    return {
        "name": "demo",
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": dict(VITE_SCRIPTS),
        "dependencies": {"react": "^18.3.1", "react-dom": "^18.3.1"},
    }


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner that emulates the external tools."""
    return FakeRunner()
