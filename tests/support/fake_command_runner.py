"""FakeCommandRunner: test double for CommandRunner.

Kept in tests/support/ (on the pytest pythonpath) so every test area can
import it unambiguously.
"""

import subprocess


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class FakeCommandRunner:
    """Test double for CommandRunner that records calls and returns canned results.

    Usage:
        fake = FakeCommandRunner()
        fake.set_result(completed(stdout="ok"))
        result = fake.run(["npm", "install"], cwd="/project")
        assert fake.calls == [("run", ["npm", "install"], "/project")]
    """

    def __init__(self):
        self._results = []
        self._side_effects = []
        self.calls = []

    def set_result(self, result):
        """Set a single result to return for the next call."""
        self._results = [result]

    def set_results(self, results):
        """Set a sequence of results to return for successive calls."""
        self._results = list(results)

    def set_side_effect(self, fn):
        """Set a callback run (with the command) on the next call."""
        self._side_effects = [fn]

    def set_side_effects(self, fns):
        self._side_effects = list(fns)

    def _next_result(self, cmd):
        if self._side_effects:
            self._side_effects.pop(0)(cmd)
        if self._results:
            return self._results.pop(0)
        return completed()

    def run(self, cmd, cwd):
        self.calls.append(("run", cmd, cwd))
        return self._next_result(cmd)

    def run_interactive(self, cmd, cwd):
        self.calls.append(("run_interactive", cmd, cwd))
        return self._next_result(cmd)

    @property
    def commands(self):
        return [cmd for _kind, cmd, _cwd in self.calls]
