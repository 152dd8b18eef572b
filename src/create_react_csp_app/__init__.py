"""
create-react-csp-app - Interactive React SPA Scaffolder
=======================================================

A CLI tool that creates a client-side rendered React + TypeScript project
on top of Vite, with an optional styling library and linting setup.

Features
--------
- **Vite based**: The base skeleton comes from ``npm create vite`` (react-swc-ts)
- **Styling**: Material-UI or Tailwind CSS, wired up and ready to use
- **Linting**: ESLint + Prettier or BiomeJS, with npm scripts added
- **Interactive**: A short wizard, no flags to remember

Quick Start
-----------
```bash
# Install
pip install create-react-csp-app

# Create a new project interactively
create-react-csp-app

# Or name the directory up front
create-react-csp-app my-app
```

Example
-------
>>> from create_react_csp_app import AnswerRecord, Styling, create_project
>>> answers = AnswerRecord(project_name="my-app", styling=Styling.MUI)
>>> create_project(answers)

Architecture
------------
The package is organized into these main modules:

- ``cli``: Typer-based command line interface
- ``prompts``: Question definitions and the questionary runner
- ``resolver``: Maps answers to packages, files and commands
- ``generator``: Executes the resolved plan against the filesystem
- ``runner``: Subprocess invocation of the external tools
- ``reporter``: Rich console output
- ``models``: Pydantic models for answers, settings and plans
- ``errors``: Exception hierarchy
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from create_react_csp_app.generator import create_project
from create_react_csp_app.models import (
    AnswerRecord,
    Linting,
    ReactQuery,
    Router,
    ScaffoldSettings,
    Styling,
)
from create_react_csp_app.resolver import resolve_options


__all__ = [
    # Configuration models
    "AnswerRecord",
    "Linting",
    "ReactQuery",
    "Router",
    "ScaffoldSettings",
    "Styling",
    # Version info
    "__version__",
    # Core functions
    "create_project",
    "resolve_options",
]
