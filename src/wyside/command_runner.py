"""CommandRunner: wraps the external commands wyside invokes (npm, npx clasp)."""

import subprocess
from typing import List


class CommandRunner:
    """Runs external commands in a working directory.

    All subprocess calls go through this class so tests can substitute a fake.
    """

    def run(self, cmd: List[str], cwd: str) -> subprocess.CompletedProcess:
        """Run a command and capture its stdout and stderr as text."""
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )

    def run_interactive(self, cmd: List[str], cwd: str) -> subprocess.CompletedProcess:
        """Run a command attached to the terminal (e.g. for a browser login)."""
        return subprocess.run(cmd, cwd=cwd)
