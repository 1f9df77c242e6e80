from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from .exceptions import ProviderQueryError


class PromptKind(str, Enum):
    CONFIRM = "confirm"
    SELECT = "select"
    INPUT = "input"


@dataclass(frozen=True)
class Question:
    kind: PromptKind
    message: str
    default: str | bool | None = None
    help: str = ""
    options: tuple[str, ...] = ()


def plan_question(value: str, question: Question) -> Question | None:
    """
    Decides whether a field needs a prompt.

    A non-empty value (from a flag) is final and returns None; otherwise the
    question to ask is returned. For selects the default is only kept when it
    is one of the options.
    """
    if value:
        return None
    if question.kind is PromptKind.SELECT and question.default not in question.options:
        return replace(question, default=None)
    return question


class ParameterResolver:
    """Resolves wizard fields through a prompter (see prompts.ConsolePrompter)."""

    def __init__(self, prompter) -> None:
        self.prompter = prompter

    def ask(self, question: Question) -> str | bool:
        if question.kind is PromptKind.CONFIRM:
            return self.prompter.confirm(
                question.message, default=bool(question.default), help=question.help
            )
        if question.kind is PromptKind.SELECT:
            return self.prompter.select(
                question.message,
                list(question.options),
                default=question.default,
                help=question.help,
            )
        return self.prompter.input(
            question.message, default=question.default, help=question.help
        )

    def confirm(self, question: Question) -> bool:
        return bool(self.ask(question))

    def resolve(self, value: str, question: Question) -> str:
        planned = plan_question(value, question)
        if planned is None:
            return value
        answer = str(self.ask(planned) or "").strip()
        return answer or str(planned.default or "")

    def resolve_select(
        self, value: str, question: Question, fetch_options: Callable[[], list[str]]
    ) -> str:
        """Like resolve, but the options are only fetched when a prompt is needed."""
        if value:
            return value
        options = fetch_options()
        if not options:
            raise ProviderQueryError(f"No options available for '{question.message}'")
        return self.resolve(value, replace(question, options=tuple(options)))
