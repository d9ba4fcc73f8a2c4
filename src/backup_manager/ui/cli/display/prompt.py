"""src/backup_manager/ui/cli/display/prompt.py
What: Rich implementation of the interactive prompt used by the listing flow.
Why: Keep console widgets out of the use cases so they can be tested headless.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text


@final
class RichPrompt:
    """Blocking prompts and tables rendered on a Rich console."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: str, default: str) -> str:
        return Prompt.ask(question, default=default, console=self.console)

    def choose(self, question: str, choices: Sequence[str], default: str) -> str:
        # Choices were listed just before; invalid answers are re-asked by Rich.
        return Prompt.ask(
            question,
            choices=list(choices),
            default=default,
            show_choices=False,
            console=self.console,
        )

    def confirm(self, question: str) -> bool:
        return Confirm.ask(question, console=self.console)

    def info(self, message: str) -> None:
        self.console.print(Text(message, style="green"))

    def line(self, message: str = "", style: str | None = None) -> None:
        self.console.print(Text(message, style=style or ""))

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Print a table; an empty ``rows`` still shows the header."""

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)


__all__ = ["RichPrompt"]
