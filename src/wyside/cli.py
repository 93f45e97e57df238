"""Top-level Click group for the wyside CLI."""

import click

from wyside.init_cmd.cli import init_cmd


@click.group()
@click.version_option(package_name="wyside")
def main():
    """wyside - scaffold Google Apps Script projects written in TypeScript."""


main.add_command(init_cmd)
