"""Options dataclass for the init command."""

from dataclasses import dataclass, replace
from typing import Optional

import click

UI_FRAMEWORK_LABELS = {
    "angular": "Angular",
    "svelte": "Svelte",
}


@dataclass(frozen=True)
class InitOpts:
    """All options for the init command."""

    assume_yes: bool = False
    assume_no: bool = False
    title: Optional[str] = None
    ui_framework: Optional[str] = None
    project_dir: str = "."

    @property
    def ui_enabled(self) -> bool:
        return self.ui_framework is not None

    @property
    def ui_framework_label(self) -> Optional[str]:
        return UI_FRAMEWORK_LABELS.get(self.ui_framework)

    def validate_flags(self):
        """Raise click.UsageError if --yes and --no are both given."""
        if self.assume_yes and self.assume_no:
            raise click.UsageError("--yes cannot be combined with --no")

    def with_answers(self, title: str, ui_framework: Optional[str]) -> "InitOpts":
        """Return a copy with the prompted title and UI framework filled in."""
        return replace(self, title=title, ui_framework=ui_framework)
