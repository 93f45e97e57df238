"""Init orchestrator: runs every project setup step in order."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import click

from wyside.clasp.clasp_helper import ClaspHelper
from wyside.command_runner import CommandRunner
from wyside.config_files.config_merge import copy_config_files, merge_config_files
from wyside.config_files.project_config import CONFIG_FILES_DIR, ProjectConfig, config_for
from wyside.init_cmd.init_opts import InitOpts
from wyside.init_cmd.prompter import PromptConfig, Prompter
from wyside.manifest.installer import InstallResult, NpmInstaller, install_packages
from wyside.manifest.package_json import PACKAGE_JSON, PackageJson
from wyside.manifest.script_sync import sync_scripts
from wyside.starter.template_installer import install_template, template_dir_for
from wyside.template_renderer import render_template

DEFAULT_TITLE = "Untitled"
CLASP_ROOT_DIR = "dist"

UI_CHOICES = [
    ("None", None),
    ("Angular", "angular"),
    ("Svelte", "svelte"),
]


@dataclass
class InitDeps:
    """Injectable dependencies for the init orchestrator."""

    runner: CommandRunner = field(default_factory=CommandRunner)
    prompt_config: PromptConfig = field(default_factory=PromptConfig)
    home_dir: Optional[str] = None
    config_files_dir: str = str(CONFIG_FILES_DIR)


def _check(message):
    return f"{click.style('✔', fg='green')} {message}"


class InitOrchestrator:
    """Sets up a project directory: package.json, configs, template and clasp.

    Steps run in a fixed order and the first failure aborts the run; files
    written by earlier steps are left in place.
    """

    def __init__(self, opts: InitOpts, deps: Optional[InitDeps] = None):
        self._opts = opts
        self._deps = deps or InitDeps()
        self._prompter = Prompter.from_opts(opts, self._deps.prompt_config)

    @property
    def project_dir(self) -> str:
        return self._opts.project_dir

    def _echo(self, message=""):
        self._prompter.echo(message)

    def run(self) -> InitOpts:
        os.makedirs(self.project_dir, exist_ok=True)
        opts = self.resolve_opts()
        config = config_for(opts.ui_framework)

        self.handle_package_json(opts, config)
        self.handle_config_copy(config)
        self.handle_config_merge(config)
        self.handle_template(opts)
        self.handle_clasp(opts)
        self._echo(render_template(
            "next-steps.j2",
            title=opts.title,
            ui_framework=opts.ui_framework,
            ui_framework_label=opts.ui_framework_label,
        ))
        return opts

    def resolve_opts(self) -> InitOpts:
        """Ask for the title and UI framework, returning the completed options."""
        title = self._opts.title or self._prompter.text("Project Title", DEFAULT_TITLE)
        ui_framework = self._prompter.select("Create a UI?", UI_CHOICES, None)
        self._opts = self._opts.with_answers(title, ui_framework)
        return self._opts

    def handle_package_json(self, opts: InitOpts, config: ProjectConfig) -> InstallResult:
        """Load or create package.json, sync scripts, save and install dependencies."""
        path = os.path.join(self.project_dir, PACKAGE_JSON)
        needs_save = False

        package_json = PackageJson.load(path)
        if package_json is None:
            if self._prompter.confirm("", f"Generate {click.style(PACKAGE_JSON, bold=True)}?", True):
                package_json = PackageJson.init(opts.title, path)
            else:
                package_json = PackageJson(path=path)
            needs_save = True

        self._echo(_check("Adding scripts..."))
        if sync_scripts(package_json, config.scripts, self._confirm_replace_script):
            needs_save = True

        if needs_save:
            self._echo(_check(f"Saving {PACKAGE_JSON}..."))
            package_json.save()

        self._echo(_check("Installing dependencies..."))
        installer = NpmInstaller(self._deps.runner, self.project_dir)
        return install_packages(package_json, config.dependencies, installer)

    def _confirm_replace_script(self, name, current, desired) -> bool:
        message = (
            f"{PACKAGE_JSON} already has a script for {click.style(name, bold=True)}:\n"
            f"-{click.style(current, fg='red')}\n"
            f"+{click.style(desired, fg='green')}"
        )
        return self._prompter.confirm(message, "Replace", False)

    def handle_config_copy(self, config: ProjectConfig) -> List[str]:
        return copy_config_files(
            config.files_copy, self._deps.config_files_dir, self.project_dir,
            self._confirm_overwrite,
        )

    def _confirm_overwrite(self, target) -> bool:
        return self._prompter.confirm(
            f"{click.style(target, bold=True)} already exists", "Overwrite", False,
        )

    def handle_config_merge(self, config: ProjectConfig) -> List[str]:
        return merge_config_files(
            config.files_merge, self._deps.config_files_dir, self.project_dir,
            self._confirm_merge,
        )

    def _confirm_merge(self, target, missing) -> bool:
        additions = "\n".join(f"+{click.style(line, fg='green')}" for line in missing)
        message = f"{click.style(target, bold=True)} already exists but is missing content\n{additions}"
        return self._prompter.confirm(message, "Merge", False)

    def handle_template(self, opts: InitOpts) -> List[str]:
        installed = install_template(template_dir_for(opts.ui_enabled), self.project_dir, opts.title)
        for item in installed:
            self._echo(_check(f"Installing {item} template..."))
        return installed

    def handle_clasp(self, opts: InitOpts) -> None:
        """Log in to clasp, then create a new script project or clone an existing one."""
        clasp = ClaspHelper(self._deps.runner, self.project_dir, self._deps.home_dir)

        clasp.login()

        if clasp.is_configured() and not self._prompter.confirm(
            "", "Override existing clasp config?", False,
        ):
            return

        script_id_dev = self._prompter.text("Script ID (optional)", "")
        script_id_prod = self._prompter.text(
            "Script ID for production environment (optional)", script_id_dev,
        )

        if script_id_dev:
            self._echo(_check(f"Cloning {script_id_dev}..."))
            clasp.clone_and_pull(script_id_dev, script_id_prod, CLASP_ROOT_DIR)
            return

        self._echo(_check(f"Creating {opts.title}..."))
        result = clasp.create(opts.title, script_id_prod, CLASP_ROOT_DIR)

        self._echo()
        self._echo(f"-> Google Sheets Link: {result.sheet_link}")
        self._echo(f"-> Apps Script Link: {result.script_link}")
        self._echo()
