"""
Tests for create_react_csp_app.prompts
======================================

questionary is replaced with mocks; no terminal interaction happens.

Test Organization
-----------------
- TestProjectNameValidation: Name validation and normalisation
- TestQuestion: Single question behaviour
- TestAskAll: The generic runner
- TestCollectAnswers: The full wizard
"""

from unittest.mock import MagicMock, patch

import pytest

from create_react_csp_app import prompts
from create_react_csp_app.errors import InputAborted, ProjectNameError
from create_react_csp_app.models import (
    AnswerRecord,
    Linting,
    ReactQuery,
    Router,
    Styling,
)
from create_react_csp_app.prompts import (
    NAME_QUESTION,
    PROJECT_NAME_ERROR,
    QUESTIONS,
    Question,
    ask_all,
    check_project_name,
    collect_answers,
    validate_project_name,
)


def prompt_returning(value) -> MagicMock:
    """A questionary prompt factory whose .ask() returns ``value``."""
    factory = MagicMock()
    factory.return_value.ask.return_value = value
    return factory


def prompt_sequence(*values) -> MagicMock:
    """A questionary prompt factory whose .ask() returns ``values`` in turn."""
    factory = MagicMock()
    factory.return_value.ask.side_effect = list(values)
    return factory


# =============================================================================
# Project Name Validation Tests
# =============================================================================

class TestProjectNameValidation:
    """Tests for interactive project name handling."""

    def test_space_becomes_hyphen(self) -> None:
        assert check_project_name("My App") == "My-App"

    def test_whitespace_runs_collapse(self) -> None:
        assert check_project_name("my \t  big app") == "my-big-app"

    def test_valid_characters_unchanged(self) -> None:
        assert check_project_name("my_app-2") == "my_app-2"

    @pytest.mark.parametrize("name", ["bad!name", "", "a/b", "dot.name", "name#1"])
    def test_invalid_names_rejected(self, name: str) -> None:
        with pytest.raises(ProjectNameError):
            check_project_name(name)

    def test_validator_returns_message(self) -> None:
        assert validate_project_name("bad!name") == PROJECT_NAME_ERROR
        assert validate_project_name("") == PROJECT_NAME_ERROR

    def test_validator_accepts(self) -> None:
        assert validate_project_name("My App") is True


# =============================================================================
# Question Tests
# =============================================================================

class TestQuestion:
    """Tests for a single Question."""

    def test_select_defaults_to_first_choice(self) -> None:
        question = Question(
            id="styling",
            message="Styling?",
            choices=(Styling.MUI, Styling.TAILWIND, Styling.NONE),
        )

        with patch.object(prompts.questionary, "select", prompt_returning(Styling.MUI)) as select:
            assert question.ask() is Styling.MUI

        _, kwargs = select.call_args
        assert kwargs["default"] is Styling.MUI
        assert [c.value for c in kwargs["choices"]] == [
            Styling.MUI, Styling.TAILWIND, Styling.NONE,
        ]
        assert [c.title for c in kwargs["choices"]] == [
            "Material-UI (MUI)", "Tailwind CSS", "None",
        ]

    def test_text_question_is_validated_and_normalized(self) -> None:
        with patch.object(prompts.questionary, "text", prompt_returning("My App")) as text:
            assert NAME_QUESTION.ask() == "My-App"

        _, kwargs = text.call_args
        assert kwargs["validate"] is validate_project_name

    def test_no_answer_aborts(self) -> None:
        with patch.object(prompts.questionary, "select", prompt_returning(None)):
            with pytest.raises(InputAborted) as exc_info:
                QUESTIONS[1].ask()

        assert exc_info.value.question == "styling"

    def test_closed_input_aborts(self) -> None:
        factory = MagicMock()
        factory.return_value.ask.side_effect = EOFError()

        with patch.object(prompts.questionary, "text", factory):
            with pytest.raises(InputAborted):
                NAME_QUESTION.ask()


# =============================================================================
# Runner Tests
# =============================================================================

class TestAskAll:
    """Tests for ask_all."""

    def test_asks_in_order(self) -> None:
        questions = [
            Question(id="first", message="1?", choices=(ReactQuery.NO, ReactQuery.YES)),
            Question(id="second", message="2?", choices=(ReactQuery.NO, ReactQuery.YES)),
        ]
        select = prompt_sequence(ReactQuery.YES, ReactQuery.NO)

        with patch.object(prompts.questionary, "select", select):
            answers = ask_all(questions)

        assert answers == {"first": ReactQuery.YES, "second": ReactQuery.NO}
        assert [c.args[0] for c in select.call_args_list] == ["1?", "2?"]

    def test_preset_answers_skip_questions(self) -> None:
        text = prompt_returning("unused")

        with patch.object(prompts.questionary, "text", text):
            answers = ask_all([NAME_QUESTION], preset={"project_name": "given name!"})

        text.assert_not_called()
        assert answers == {"project_name": "given name!"}

    def test_abort_stops_sequence(self) -> None:
        select = prompt_sequence(Styling.MUI, None, Router.NONE)

        with patch.object(prompts.questionary, "select", select):
            with pytest.raises(InputAborted):
                ask_all(QUESTIONS[1:], preset={"project_name": "demo"})

        assert select.return_value.ask.call_count == 2


# =============================================================================
# Wizard Tests
# =============================================================================

class TestCollectAnswers:
    """Tests for collect_answers."""

    def test_full_interactive_run(self) -> None:
        text = prompt_returning("My App")
        select = prompt_sequence(
            Styling.TAILWIND, Linting.BIOME, Router.REACT_ROUTER, ReactQuery.YES,
        )

        with patch.object(prompts.questionary, "text", text), \
                patch.object(prompts.questionary, "select", select):
            answers = collect_answers()

        assert answers == AnswerRecord(
            project_name="My-App",
            styling=Styling.TAILWIND,
            linting=Linting.BIOME,
            router=Router.REACT_ROUTER,
            react_query=ReactQuery.YES,
        )

    def test_positional_name_used_verbatim(self) -> None:
        """A name from the command line is neither validated nor normalised."""
        text = prompt_returning("unused")
        select = prompt_sequence(Styling.NONE, Linting.NONE, Router.NONE, ReactQuery.NO)

        with patch.object(prompts.questionary, "text", text), \
                patch.object(prompts.questionary, "select", select):
            answers = collect_answers("my app!")

        text.assert_not_called()
        assert answers.project_name == "my app!"
        assert select.call_count == 4

    def test_question_messages(self) -> None:
        assert [q.id for q in QUESTIONS] == [
            "project_name", "styling", "linting", "router", "react_query",
        ]
        assert QUESTIONS[0].message == "What is your project name?"
        assert QUESTIONS[4].message == "Would you like to use React Query?"
