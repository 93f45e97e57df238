"""Numbered-option menu used for select prompts."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

import click


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def _display_options(prompt, options, default, output):
    print(prompt, file=output)
    for i, option in enumerate(options):
        label = f"  {i + 1}) {option}"
        if i + 1 == default:
            label += " [default]"
        print(label, file=output)


def _parse_choice(raw_input, option_count, default):
    raw_input = raw_input.strip()
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def get_user_choice(prompt: str, default: int, options: Sequence[str], *, config=None) -> int:
    """Display numbered options and return the 1-based index of the selection.

    Raises:
        click.Abort: On EOF (e.g. piped input closed).
    """
    if config is None:
        config = MenuConfig()

    _display_options(prompt, options, default, config.output)
    prompt_text = f"Enter your choice (1-{len(options)}) [default: {default}]: "

    while True:
        try:
            choice = config.input_fn(prompt_text)
        except EOFError:
            raise click.Abort() from None
        parsed = _parse_choice(choice, len(options), default)
        if parsed is not None:
            return parsed
        print(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )
