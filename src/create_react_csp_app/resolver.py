"""
create_react_csp_app.resolver - Option Resolution
=================================================

Turns an ``AnswerRecord`` into a ``ResolutionPlan``: which packages to
install, which files to write or delete, which tool initializers to run and
how to patch the package.json scripts.

Resolution is a pure function of the answers and the settings. Nothing here
touches the filesystem or starts a process; each call builds a new plan, so
the same answers always give the same plan.

Option Tables
-------------
    styling = mui        -> dependencies:     MUI_PACKAGES
    styling = tailwind   -> dev dependencies: tailwindcss@<pin>, postcss, autoprefixer
                            initializer:      npx tailwindcss init -p
                            files:            tailwind.config.js, src/index.css
    linting = eslint...  -> dev dependencies: ESLINT_PRETTIER_PACKAGES
                            files:            .prettierrc
                            scripts:          lint, lint:fix, format
    linting = biome      -> dev dependencies: @biomejs/biome
                            delete:           eslint.config.js
                            initializer:      npx biome init
                            scripts:          lint, lint:fix
    linting = none       -> scripts:          remove lint, lint:fix, format

Router and React Query answers have no entry in these tables.

Usage Example
-------------
>>> from create_react_csp_app.models import AnswerRecord, Styling
>>> plan = resolve_options(AnswerRecord(project_name="demo", styling=Styling.MUI))
>>> plan.packages.dependencies[0]
'@mui/material'
"""

from __future__ import annotations

import json

from jinja2 import Environment, PackageLoader, select_autoescape

from create_react_csp_app.models import (
    AnswerRecord,
    CommandInvocation,
    DependencyPlan,
    FileDelete,
    FileWrite,
    InitializerStep,
    Linting,
    ResolutionPlan,
    ScaffoldSettings,
    ScriptsPatch,
    Styling,
)


# =============================================================================
# Option Tables
# =============================================================================

MUI_PACKAGES: tuple[str, ...] = (
    "@mui/material",
    "@emotion/react",
    "@emotion/styled",
    "@mui/icons-material",
)

# tailwindcss itself is pinned from ScaffoldSettings.tailwind_version
TAILWIND_SUPPORT_PACKAGES: tuple[str, ...] = (
    "postcss",
    "autoprefixer",
)

ESLINT_PRETTIER_PACKAGES: tuple[str, ...] = (
    "eslint",
    "prettier",
    "eslint-config-prettier",
    "eslint-plugin-prettier",
    "eslint-plugin-react",
    "eslint-plugin-react-hooks",
)

BIOME_PACKAGES: tuple[str, ...] = (
    "@biomejs/biome",
)

TAILWIND_CONTENT_GLOBS: tuple[str, ...] = (
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
)

TAILWIND_LAYERS: tuple[str, ...] = ("base", "components", "utilities")

PRETTIER_CONFIG: dict[str, object] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": True,
    "printWidth": 100,
    "tabWidth": 2,
}

ESLINT_PRETTIER_SCRIPTS: dict[str, str] = {
    "lint": "eslint src --ext .ts,.tsx",
    "lint:fix": "eslint src --ext .ts,.tsx --fix",
    "format": "prettier --write 'src/**/*.{ts,tsx,css,md}'",
}

BIOME_SCRIPTS: dict[str, str] = {
    "lint": "biome check --apply src",
    "lint:fix": "biome check --apply --fix src",
}

# Scripts owned by the linting setup; dropped when no linting is selected
LINT_SCRIPT_NAMES: tuple[str, ...] = ("lint", "lint:fix", "format")

# Files, relative to the project root
PRETTIER_CONFIG_FILE = ".prettierrc"
ESLINT_CONFIG_FILE = "eslint.config.js"
TAILWIND_CONFIG_FILE = "tailwind.config.js"
STYLESHEET_FILE = "src/index.css"


# =============================================================================
# Template Engine Setup
# =============================================================================

def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for generated config files.

    Autoescaping is off because the output is JavaScript and CSS, and
    ``trim_blocks``/``lstrip_blocks`` keep loop tags from leaving blank lines.

    Returns
    -------
    Environment
        Environment loading from ``create_react_csp_app/templates``.
    """
    return Environment(
        loader=PackageLoader("create_react_csp_app", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_tailwind_config(env: Environment | None = None) -> str:
    """Render ``tailwind.config.js`` with the fixed content globs."""
    env = env or create_jinja_env()
    template = env.get_template("tailwind.config.js.j2")
    return template.render(content_globs=TAILWIND_CONTENT_GLOBS)


def render_stylesheet(env: Environment | None = None) -> str:
    """Render ``src/index.css`` with the three Tailwind layer directives."""
    env = env or create_jinja_env()
    template = env.get_template("index.css.j2")
    return template.render(layers=TAILWIND_LAYERS)


def render_prettier_config() -> str:
    """Serialize the Prettier options as 2-space indented JSON."""
    return json.dumps(PRETTIER_CONFIG, indent=2) + "\n"


# =============================================================================
# Command Builders
# =============================================================================

def scaffold_command(project_name: str, settings: ScaffoldSettings) -> CommandInvocation:
    """
    Build the base template generator invocation.

    The ``--`` separator forwards ``--template`` to the scaffolder instead
    of the package manager.
    """
    return CommandInvocation(
        args=(
            settings.package_manager,
            "create",
            settings.scaffolder_package,
            project_name,
            "--",
            "--template",
            settings.template,
        ),
        description=f"Scaffolding {settings.template} template",
    )


def install_command(
    packages: tuple[str, ...],
    settings: ScaffoldSettings,
    *,
    dev: bool = False,
) -> CommandInvocation:
    """
    Build one ``install`` invocation for all ``packages``.

    Parameters
    ----------
    packages : tuple[str, ...]
        Package identifiers, passed in the given order.

    settings : ScaffoldSettings
        Supplies the package manager executable.

    dev : bool, default=False
        Add ``--save-dev``.

    Returns
    -------
    CommandInvocation
        Invocation without a working directory; the generator binds it.
    """
    args = [settings.package_manager, "install"]
    if dev:
        args.append("--save-dev")
    args.extend(packages)

    kind = "development dependencies" if dev else "dependencies"
    return CommandInvocation(args=tuple(args), description=f"Installing {kind}")


# =============================================================================
# Resolution
# =============================================================================

def resolve_dependencies(
    answers: AnswerRecord,
    settings: ScaffoldSettings | None = None,
) -> DependencyPlan:
    """
    Resolve the packages to install for ``answers``.

    Styling packages come before linting packages; within a group the order
    of the option table is kept.

    Returns
    -------
    DependencyPlan
        Runtime and development dependencies.
    """
    settings = settings or ScaffoldSettings()
    dependencies: list[str] = []
    dev_dependencies: list[str] = []

    if answers.styling == Styling.MUI:
        dependencies.extend(MUI_PACKAGES)
    elif answers.styling == Styling.TAILWIND:
        dev_dependencies.append(f"tailwindcss@{settings.tailwind_version}")
        dev_dependencies.extend(TAILWIND_SUPPORT_PACKAGES)

    if answers.linting == Linting.ESLINT_PRETTIER:
        dev_dependencies.extend(ESLINT_PRETTIER_PACKAGES)
    elif answers.linting == Linting.BIOME:
        dev_dependencies.extend(BIOME_PACKAGES)

    return DependencyPlan(
        dependencies=tuple(dependencies),
        dev_dependencies=tuple(dev_dependencies),
    )


def resolve_scripts(linting: Linting) -> ScriptsPatch:
    """
    Resolve the package.json scripts patch for a linting choice.

    ESLint + Prettier sets ``lint``, ``lint:fix`` and ``format``; Biome sets
    ``lint`` and ``lint:fix``; no linting removes all three.
    """
    if linting == Linting.ESLINT_PRETTIER:
        return ScriptsPatch(updates=dict(ESLINT_PRETTIER_SCRIPTS))
    if linting == Linting.BIOME:
        return ScriptsPatch(updates=dict(BIOME_SCRIPTS))
    return ScriptsPatch(remove=LINT_SCRIPT_NAMES)


def resolve_options(
    answers: AnswerRecord,
    settings: ScaffoldSettings | None = None,
) -> ResolutionPlan:
    """
    Resolve the full plan for a set of answers.

    Parameters
    ----------
    answers : AnswerRecord
        Completed answers from the prompt sequence.

    settings : ScaffoldSettings | None
        Tool names and pinned versions. Defaults are used if None.

    Returns
    -------
    ResolutionPlan
        A new, frozen plan. Calling this twice with equal arguments gives
        equal plans.

    Examples
    --------
    >>> from create_react_csp_app.models import AnswerRecord, Linting
    >>> plan = resolve_options(AnswerRecord(project_name="x", linting=Linting.BIOME))
    >>> [f.path for f in plan.removed_files]
    ['eslint.config.js']
    """
    settings = settings or ScaffoldSettings()

    config_files: list[FileWrite] = []
    removed_files: list[FileDelete] = []
    initializers: list[InitializerStep] = []

    if answers.styling == Styling.TAILWIND:
        env = create_jinja_env()
        initializers.append(InitializerStep(
            command=CommandInvocation(
                args=(settings.package_runner, "tailwindcss", "init", "-p"),
                description="Initializing Tailwind CSS",
            ),
            files=(
                FileWrite(path=TAILWIND_CONFIG_FILE, content=render_tailwind_config(env)),
                FileWrite(path=STYLESHEET_FILE, content=render_stylesheet(env)),
            ),
        ))

    if answers.linting == Linting.ESLINT_PRETTIER:
        config_files.append(
            FileWrite(path=PRETTIER_CONFIG_FILE, content=render_prettier_config())
        )
    elif answers.linting == Linting.BIOME:
        removed_files.append(FileDelete(path=ESLINT_CONFIG_FILE))
        initializers.append(InitializerStep(
            command=CommandInvocation(
                args=(settings.package_runner, "biome", "init"),
                description="Initializing Biome",
            ),
        ))

    return ResolutionPlan(
        packages=resolve_dependencies(answers, settings),
        scaffold=scaffold_command(answers.project_name, settings),
        config_files=tuple(config_files),
        removed_files=tuple(removed_files),
        initializers=tuple(initializers),
        scripts=resolve_scripts(answers.linting),
    )
