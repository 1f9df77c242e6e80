from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table


class ConsolePrompter:
    """Renders wizard questions on the terminal with rich prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def _help(self, help: str) -> None:
        if help:
            self.console.print(f"[dim]{help}[/dim]")

    def confirm(self, message: str, default: bool = False, help: str = "") -> bool:
        self._help(help)
        return Confirm.ask(message, default=default, console=self.console)

    def input(self, message: str, default: str | None = None, help: str = "") -> str:
        self._help(help)
        if default is None:
            return Prompt.ask(message, console=self.console)
        return Prompt.ask(message, default=default, console=self.console)

    def select(
        self,
        message: str,
        options: list[str],
        default: str | None = None,
        help: str = "",
    ) -> str:
        """
        Shows the options as a numbered table. The answer may be the row
        number or the option itself.
        """
        table = Table(title=message, show_header=False, box=None)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Option", style="green")
        for i, option in enumerate(options, start=1):
            marker = " [bold](default)[/bold]" if option == default else ""
            table.add_row(str(i), f"{option}{marker}")
        self.console.print(table)
        self._help(help)

        numbers = [str(i) for i in range(1, len(options) + 1)]
        kwargs = {}
        if default is not None:
            kwargs["default"] = default
        answer = Prompt.ask(
            message,
            choices=numbers + list(options),
            show_choices=False,
            console=self.console,
            **kwargs,
        )
        if answer in numbers and answer not in options:
            return options[int(answer) - 1]
        return answer
