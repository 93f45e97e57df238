"""ClaspHelper: wraps the clasp commands and files used to set up deployment."""

import json
import os
import re
import shutil
from dataclasses import dataclass
from typing import List, Optional

from wyside.command_runner import CommandRunner
from wyside.errors import ClaspError
from wyside.file_io import atomic_write

CLASPRC = ".clasprc.json"
CLASP_CONFIG = ".clasp.json"
CLASP_DEV_CONFIG = ".clasp-dev.json"
CLASP_PROD_CONFIG = ".clasp-prod.json"
APPS_SCRIPT_MANIFEST = "appsscript.json"

NOT_FOUND = "Not found"

_SHEETS_LINK_RE = re.compile(r"Created new document: ([^\n]*)")
_SCRIPT_LINK_RE = re.compile(r"Created new script: ([^\n]*)")


@dataclass
class ClaspCreateResult:
    sheet_link: str
    script_link: str


def _extract(pattern, output: str) -> str:
    match = pattern.search(output)
    return match.group(1) if match else NOT_FOUND


class ClaspHelper:
    """Runs `npx clasp` in a project directory and arranges its config files.

    The dev config lives in .clasp-dev.json and the production config in
    .clasp-prod.json; deploy scripts copy one of them to .clasp.json.
    """

    def __init__(self, runner: CommandRunner, project_dir: str, home_dir: Optional[str] = None):
        self._runner = runner
        self._project_dir = project_dir
        self._home_dir = home_dir or os.path.expanduser("~")

    def _path(self, *parts) -> str:
        return os.path.join(self._project_dir, *parts)

    def _run_clasp(self, args: List[str], interactive: bool = False):
        cmd = ["npx", "clasp"] + args
        if interactive:
            result = self._runner.run_interactive(cmd, cwd=self._project_dir)
        else:
            result = self._runner.run(cmd, cwd=self._project_dir)
        if result.returncode != 0:
            raise ClaspError(f"clasp {args[0]} failed with exit code {result.returncode}")
        return result

    def is_logged_in(self) -> bool:
        return os.path.exists(os.path.join(self._home_dir, CLASPRC))

    def login(self) -> None:
        """Run `clasp login` unless credentials already exist."""
        if not self.is_logged_in():
            self._run_clasp(["login"], interactive=True)

    def is_configured(self) -> bool:
        return os.path.exists(self._path(CLASP_DEV_CONFIG)) or os.path.exists(
            self._path("dist", CLASP_CONFIG)
        )

    def clean(self, root_dir: str) -> None:
        """Remove clasp project artifacts and make sure root_dir exists."""
        root_config = os.path.join(root_dir, CLASP_CONFIG)
        if os.path.isdir(self._path(root_config)):
            shutil.rmtree(self._path(root_config))
        for path in (root_config, APPS_SCRIPT_MANIFEST, CLASP_CONFIG, CLASP_DEV_CONFIG, CLASP_PROD_CONFIG):
            try:
                os.remove(self._path(path))
            except FileNotFoundError:
                pass
        os.makedirs(self._path(root_dir), exist_ok=True)

    def extract_sheets_link(self, output: str) -> str:
        return _extract(_SHEETS_LINK_RE, output)

    def extract_script_link(self, output: str) -> str:
        return _extract(_SCRIPT_LINK_RE, output)

    def create(self, title: str, script_id_prod: Optional[str], root_dir: str) -> ClaspCreateResult:
        """Create a new Sheets-bound script project and return its links."""
        self.clean(root_dir)

        result = self._run_clasp(
            ["create-script", "--type", "sheets", "--rootDir", root_dir, "--title", title]
        )

        self.arrange_files(root_dir, script_id_prod)

        output = "\n".join(part for part in (result.stdout, result.stderr) if part)
        return ClaspCreateResult(
            sheet_link=self.extract_sheets_link(output),
            script_link=self.extract_script_link(output),
        )

    def arrange_files(self, root_dir: str, script_id_prod: Optional[str] = None) -> None:
        """Move the files clasp wrote to where the deploy scripts expect them."""
        shutil.move(self._path(CLASP_CONFIG), self._path(CLASP_DEV_CONFIG))
        shutil.move(self._path(root_dir, APPS_SCRIPT_MANIFEST), self._path(APPS_SCRIPT_MANIFEST))

        if script_id_prod:
            self.write_config(script_id_prod, root_dir, CLASP_PROD_CONFIG)
        else:
            shutil.copyfile(self._path(CLASP_DEV_CONFIG), self._path(CLASP_PROD_CONFIG))

    def clone_and_pull(self, script_id_dev: str, script_id_prod: Optional[str], root_dir: str) -> None:
        """Clone an existing script project into root_dir."""
        self.clean(root_dir)

        self.write_config(script_id_dev, root_dir)
        shutil.copyfile(self._path(CLASP_CONFIG), self._path(root_dir, CLASP_CONFIG))

        self._run_clasp(["clone"], interactive=True)
        self._run_clasp(["pull"], interactive=True)

        self.arrange_files(root_dir, script_id_prod)

    def write_config(self, script_id: str, root_dir: str, filename: str = CLASP_CONFIG) -> None:
        config = {"scriptId": script_id, "rootDir": root_dir}
        atomic_write(self._path(filename), json.dumps(config))
