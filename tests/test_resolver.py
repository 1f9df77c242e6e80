from unittest.mock import MagicMock

import pytest

from gkewizard.exceptions import ProviderQueryError
from gkewizard.prompts import ConsolePrompter
from gkewizard.resolver import ParameterResolver, PromptKind, Question, plan_question

ZONE = Question(PromptKind.SELECT, "Zone:", help="pick one")
MACHINE = Question(PromptKind.SELECT, "Machine:", default="n1-standard-2")
MIN_NODES = Question(PromptKind.INPUT, "Minimum number of Nodes", default="3")


@pytest.fixture
def prompter():
    return MagicMock(spec=ConsolePrompter)


def test_plan_skips_flag_values():
    assert plan_question("us-west1-b", ZONE) is None
    assert plan_question("7", MIN_NODES) is None


def test_plan_asks_when_empty():
    assert plan_question("", MIN_NODES) == MIN_NODES


def test_plan_drops_select_default_missing_from_options():
    q = Question(PromptKind.SELECT, "Machine:", default="n1-standard-2", options=("e2-small",))
    assert plan_question("", q).default is None

    q = Question(
        PromptKind.SELECT, "Machine:", default="n1-standard-2", options=("n1-standard-2",)
    )
    assert plan_question("", q).default == "n1-standard-2"


def test_flag_value_used_verbatim_without_prompt(prompter):
    resolver = ParameterResolver(prompter)
    fetch = MagicMock()

    assert resolver.resolve_select("Europe-West1-B", ZONE, fetch) == "Europe-West1-B"
    assert resolver.resolve("10", MIN_NODES) == "10"

    fetch.assert_not_called()
    prompter.select.assert_not_called()
    prompter.input.assert_not_called()


def test_select_fetches_options_when_prompting(prompter):
    prompter.select.return_value = "n1-standard-2"
    resolver = ParameterResolver(prompter)

    result = resolver.resolve_select(
        "", MACHINE, lambda: ["e2-medium", "n1-standard-2"]
    )

    assert result == "n1-standard-2"
    prompter.select.assert_called_once_with(
        "Machine:", ["e2-medium", "n1-standard-2"], default="n1-standard-2", help=""
    )


def test_select_fetch_failure_aborts(prompter):
    resolver = ParameterResolver(prompter)

    def failing_fetch():
        raise ProviderQueryError("boom")

    with pytest.raises(ProviderQueryError):
        resolver.resolve_select("", ZONE, failing_fetch)
    prompter.select.assert_not_called()


def test_select_without_options_aborts(prompter):
    resolver = ParameterResolver(prompter)

    with pytest.raises(ProviderQueryError):
        resolver.resolve_select("", ZONE, lambda: [])


def test_empty_input_keeps_default(prompter):
    prompter.input.return_value = ""
    resolver = ParameterResolver(prompter)

    assert resolver.resolve("", MIN_NODES) == "3"


def test_input_answer_is_not_validated(prompter):
    prompter.input.return_value = "lots"
    resolver = ParameterResolver(prompter)

    assert resolver.resolve("", MIN_NODES) == "lots"


def test_confirm(prompter):
    prompter.confirm.return_value = False
    resolver = ParameterResolver(prompter)

    assert resolver.confirm(Question(PromptKind.CONFIRM, "Go?", default=True)) is False
    prompter.confirm.assert_called_once_with("Go?", default=True, help="")
