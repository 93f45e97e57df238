"""Click command for the init workflow."""

import sys
from contextlib import contextmanager

import click

from wyside.errors import WysideError
from wyside.init_cmd.init_opts import InitOpts
from wyside.init_cmd.orchestrator import InitDeps, InitOrchestrator


@contextmanager
def with_error_handling():
    """Print the message of an expected failure and exit with status 1."""
    try:
        yield
    except (WysideError, OSError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)


@click.command("init")
@click.option("--title", "-t", envvar="WYSIDE_TITLE", help="Project title.")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Assume yes for every prompt.")
@click.option("--no", "-n", "assume_no", is_flag=True, help="Assume no for every prompt.")
@click.option(
    "--dir", "-d", "project_dir", default=".", show_default=True,
    type=click.Path(file_okay=False), help="Project directory to set up.",
)
def init_cmd(title, assume_yes, assume_no, project_dir):
    """Set up an Apps Script project in the project directory."""
    opts = InitOpts(
        assume_yes=assume_yes,
        assume_no=assume_no,
        title=title,
        project_dir=project_dir,
    )
    opts.validate_flags()

    with with_error_handling():
        InitOrchestrator(opts, InitDeps()).run()
