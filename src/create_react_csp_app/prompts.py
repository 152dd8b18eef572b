"""
create_react_csp_app.prompts - Interactive Prompt Sequence
==========================================================

The wizard is a list of ``Question`` definitions run in order by
``ask_all``. Adding, removing or reordering a question is a change to
``QUESTIONS``; the runner does not know about individual questions.

Each question blocks until answered. There is no way back to an earlier
question, and a prompt that returns nothing (Ctrl-C, closed input) ends
the whole sequence with ``InputAborted``.

Usage Example
-------------
>>> answers = collect_answers()                  # asks for the name too
>>> answers = collect_answers("my-app")          # name question skipped
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import questionary

from create_react_csp_app.errors import InputAborted, ProjectNameError
from create_react_csp_app.models import (
    AnswerRecord,
    Linting,
    ReactQuery,
    Router,
    Styling,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from enum import Enum


# =============================================================================
# Project Name Validation
# =============================================================================

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9\s_-]+")

PROJECT_NAME_ERROR = (
    "Project name may only include letters, numbers, spaces, hyphens and underscores."
)


def check_project_name(text: str) -> str:
    """
    Validate and normalise an interactively entered project name.

    Parameters
    ----------
    text : str
        Raw input.

    Returns
    -------
    str
        The name with each run of whitespace replaced by one hyphen.

    Raises
    ------
    ProjectNameError
        If the input is empty or contains other characters.

    Examples
    --------
    >>> check_project_name("My App")
    'My-App'
    """
    if not PROJECT_NAME_PATTERN.fullmatch(text):
        raise ProjectNameError(PROJECT_NAME_ERROR)
    return normalize_project_name(text)


def normalize_project_name(text: str) -> str:
    """Replace each run of whitespace with a single hyphen."""
    return re.sub(r"\s+", "-", text)


def validate_project_name(text: str) -> bool | str:
    """questionary validator: True, or the message to show before re-asking."""
    try:
        check_project_name(text)
    except ProjectNameError as e:
        return str(e)
    return True


# =============================================================================
# Question Definitions
# =============================================================================

@dataclass(frozen=True)
class Question:
    """
    One step of the wizard.

    Attributes
    ----------
    id : str
        AnswerRecord field this question fills.

    message : str
        Prompt text.

    kind : str
        ``"text"`` for free input, ``"select"`` for a list of choices.

    choices : tuple[Enum, ...]
        Options for a select question, in display order. The first one is
        where the cursor starts.

    validate : Callable | None
        Text validator returning True or an error message.

    normalize : Callable | None
        Applied to accepted text input.
    """

    id: str
    message: str
    kind: str = "select"
    choices: tuple[Enum, ...] = field(default=())
    validate: Callable[[str], bool | str] | None = None
    normalize: Callable[[str], str] | None = None

    def build(self) -> questionary.Question:
        """Create the questionary prompt for this question."""
        if self.kind == "text":
            if self.validate is None:
                return questionary.text(self.message)
            return questionary.text(self.message, validate=self.validate)

        return questionary.select(
            self.message,
            choices=[
                questionary.Choice(title=choice.label, value=choice)
                for choice in self.choices
            ],
            default=self.choices[0],
        )

    def ask(self) -> Any:
        """
        Ask this question and return the answer.

        Raises
        ------
        InputAborted
            If the prompt was cancelled or input ended.
        """
        try:
            answer = self.build().ask()
        except EOFError as e:
            raise InputAborted(self.id) from e

        if answer is None:
            raise InputAborted(self.id)

        if self.normalize is not None:
            answer = self.normalize(answer)
        return answer


NAME_QUESTION = Question(
    id="project_name",
    message="What is your project name?",
    kind="text",
    validate=validate_project_name,
    normalize=normalize_project_name,
)

QUESTIONS: tuple[Question, ...] = (
    NAME_QUESTION,
    Question(
        id="styling",
        message="Which styling solution would you like to use?",
        choices=(Styling.MUI, Styling.TAILWIND, Styling.NONE),
    ),
    Question(
        id="linting",
        message="Which linting solution would you like to use?",
        choices=(Linting.ESLINT_PRETTIER, Linting.BIOME, Linting.NONE),
    ),
    Question(
        id="router",
        message="Which routing library would you like to use?",
        choices=(Router.NONE, Router.REACT_ROUTER, Router.TANSTACK_ROUTER),
    ),
    Question(
        id="react_query",
        message="Would you like to use React Query?",
        choices=(ReactQuery.NO, ReactQuery.YES),
    ),
)


# =============================================================================
# Runner
# =============================================================================

def ask_all(
    questions: Sequence[Question],
    preset: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Ask each question in order, skipping those already answered.

    Parameters
    ----------
    questions : Sequence[Question]
        Questions in the order they are shown.

    preset : dict[str, Any] | None
        Answers known up front, keyed by question id. They are used as is.

    Returns
    -------
    dict[str, Any]
        Answers keyed by question id, preset values included.
    """
    answers: dict[str, Any] = dict(preset or {})
    for question in questions:
        if question.id in answers:
            continue
        answers[question.id] = question.ask()
    return answers


def collect_answers(project_directory: str | None = None) -> AnswerRecord:
    """
    Run the wizard and return the completed answers.

    Parameters
    ----------
    project_directory : str | None
        Name given on the command line. When set, the name question is
        skipped and the value is used verbatim.

    Returns
    -------
    AnswerRecord
        Fully populated answers.

    Raises
    ------
    InputAborted
        If any question went unanswered.
    """
    preset = {"project_name": project_directory} if project_directory else None
    return AnswerRecord(**ask_all(QUESTIONS, preset))
