"""Prompter: interactive questions that --yes / --no can answer up front."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO, Tuple

import click

from wyside.init_cmd.menu import MenuConfig, get_user_choice


@dataclass
class PromptConfig:
    """I/O used by the Prompter; tests replace these with canned answers."""

    confirm_fn: Callable[..., bool] = field(default_factory=lambda: click.confirm)
    prompt_fn: Callable[..., str] = field(default_factory=lambda: click.prompt)
    menu_config: MenuConfig = field(default_factory=MenuConfig)
    output: Optional[TextIO] = None


class Prompter:
    """Asks the user questions unless the answer is forced by a flag.

    --yes answers every confirmation with True and every text or select
    question with its default. --no answers every confirmation with False and
    every select question with its default; text questions are still asked.
    """

    def __init__(self, assume_yes: bool = False, assume_no: bool = False, config: Optional[PromptConfig] = None):
        self.assume_yes = assume_yes
        self.assume_no = assume_no
        self._config = config or PromptConfig()

    @classmethod
    def from_opts(cls, opts, config: Optional[PromptConfig] = None) -> "Prompter":
        return cls(assume_yes=opts.assume_yes, assume_no=opts.assume_no, config=config)

    def echo(self, message: str = ""):
        click.echo(message, file=self._config.output)

    def confirm(self, message: str, question: str, default: bool) -> bool:
        """Show message (if any) and ask a yes/no question."""
        if self.assume_yes:
            return True
        if self.assume_no:
            return False

        if message:
            self.echo(message)
        return self._config.confirm_fn(question, default=default)

    def text(self, message: str, default: str) -> str:
        if self.assume_yes:
            return default
        return self._config.prompt_fn(message, default=default, show_default=bool(default))

    def select(self, message: str, choices: Sequence[Tuple[str, Optional[str]]], default):
        """Ask the user to pick one of (label, value) choices, returning the value."""
        if self.assume_yes or self.assume_no:
            return default

        values = [value for _label, value in choices]
        selected = get_user_choice(
            message,
            values.index(default) + 1,
            [label for label, _value in choices],
            config=self._config.menu_config,
        )
        return values[selected - 1]
