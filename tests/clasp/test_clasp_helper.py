"""Tests for ClaspHelper: login, project creation and cloning."""

import json

import pytest

from fake_command_runner import FakeCommandRunner, completed

from wyside.clasp.clasp_helper import ClaspCreateResult, ClaspHelper
from wyside.errors import ClaspError


@pytest.fixture
def project(tmp_path):
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def home(tmp_path):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


def _helper(runner, project, home):
    return ClaspHelper(runner, str(project), str(home))


def _simulate_clasp_files(project, root_dir="dist", script_id="dev-id"):
    """Write the files clasp leaves behind after create/clone."""
    def side_effect(_cmd):
        (project / ".clasp.json").write_text(json.dumps({"scriptId": script_id, "rootDir": root_dir}))
        (project / root_dir / "appsscript.json").write_text('{"timeZone": "UTC"}')
    return side_effect


@pytest.mark.unit
class TestLogin:

    def test_not_logged_in_without_clasprc(self, project, home):
        assert _helper(FakeCommandRunner(), project, home).is_logged_in() is False

    def test_logged_in_with_clasprc(self, project, home):
        (home / ".clasprc.json").write_text("{}")
        assert _helper(FakeCommandRunner(), project, home).is_logged_in() is True

    def test_runs_clasp_login_if_not_logged_in(self, project, home):
        runner = FakeCommandRunner()

        _helper(runner, project, home).login()

        assert runner.calls == [("run_interactive", ["npx", "clasp", "login"], str(project))]

    def test_does_nothing_if_already_logged_in(self, project, home):
        (home / ".clasprc.json").write_text("{}")
        runner = FakeCommandRunner()

        _helper(runner, project, home).login()

        assert runner.calls == []

    def test_failed_login_raises(self, project, home):
        runner = FakeCommandRunner()
        runner.set_result(completed(returncode=1))

        with pytest.raises(ClaspError, match="clasp login"):
            _helper(runner, project, home).login()


@pytest.mark.unit
class TestIsConfigured:

    def test_false_if_config_files_do_not_exist(self, project, home):
        assert _helper(FakeCommandRunner(), project, home).is_configured() is False

    def test_true_with_dev_config(self, project, home):
        (project / ".clasp-dev.json").write_text("{}")
        assert _helper(FakeCommandRunner(), project, home).is_configured() is True

    def test_true_with_dist_config(self, project, home):
        (project / "dist").mkdir()
        (project / "dist" / ".clasp.json").write_text("{}")
        assert _helper(FakeCommandRunner(), project, home).is_configured() is True


@pytest.mark.unit
class TestClean:

    def test_removes_all_config_files_and_creates_root_dir(self, project, home):
        for name in ("appsscript.json", ".clasp.json", ".clasp-dev.json", ".clasp-prod.json"):
            (project / name).write_text("{}")
        (project / "rootDir").mkdir()
        (project / "rootDir" / ".clasp.json").write_text("{}")

        _helper(FakeCommandRunner(), project, home).clean("rootDir")

        assert sorted(p.name for p in project.iterdir()) == ["rootDir"]
        assert list((project / "rootDir").iterdir()) == []

    def test_relative_project_dir(self, tmp_path, project, home, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (project / "dist").mkdir()
        (project / "dist" / ".clasp.json").write_text("{}")
        (project / ".clasp-dev.json").write_text("{}")

        ClaspHelper(FakeCommandRunner(), "project", str(home)).clean("dist")

        assert not (project / "dist" / ".clasp.json").exists()
        assert not (project / ".clasp-dev.json").exists()
        assert (project / "dist").is_dir()

    def test_root_config_directory_is_removed(self, project, home):
        (project / "dist" / ".clasp.json").mkdir(parents=True)
        (project / "dist" / ".clasp.json" / "stray").write_text("x")

        _helper(FakeCommandRunner(), project, home).clean("dist")

        assert list((project / "dist").iterdir()) == []

    def test_missing_files_are_fine(self, project, home):
        _helper(FakeCommandRunner(), project, home).clean("dist")
        assert (project / "dist").is_dir()


@pytest.mark.unit
class TestExtractLinks:

    def test_sheets_link_not_found(self, project, home):
        assert _helper(FakeCommandRunner(), project, home).extract_sheets_link("") == "Not found"

    def test_extracts_sheets_link(self, project, home):
        output = "Created new document: https://drive.google.com/abc123"
        assert _helper(FakeCommandRunner(), project, home).extract_sheets_link(output) == "https://drive.google.com/abc123"

    def test_script_link_not_found(self, project, home):
        assert _helper(FakeCommandRunner(), project, home).extract_script_link("") == "Not found"

    def test_extracts_script_link_from_multiline_output(self, project, home):
        output = (
            "Created new document: https://drive.google.com/doc\n"
            "Created new script: https://script.google.com/d/abc123/edit\n"
            "Cloned 1 file.\n"
        )
        helper = _helper(FakeCommandRunner(), project, home)
        assert helper.extract_script_link(output) == "https://script.google.com/d/abc123/edit"
        assert helper.extract_sheets_link(output) == "https://drive.google.com/doc"


@pytest.mark.unit
class TestArrangeFiles:

    def _clasp_output(self, project):
        (project / "rootDir").mkdir()
        (project / ".clasp.json").write_text('{"scriptId": "dev"}')
        (project / "rootDir" / "appsscript.json").write_text("{}")

    def test_without_prod_id_copies_dev_config(self, project, home):
        self._clasp_output(project)

        _helper(FakeCommandRunner(), project, home).arrange_files("rootDir")

        assert not (project / ".clasp.json").exists()
        assert (project / ".clasp-dev.json").read_text() == '{"scriptId": "dev"}'
        assert (project / ".clasp-prod.json").read_text() == '{"scriptId": "dev"}'
        assert (project / "appsscript.json").exists()
        assert not (project / "rootDir" / "appsscript.json").exists()

    def test_with_prod_id_writes_prod_config(self, project, home):
        self._clasp_output(project)

        _helper(FakeCommandRunner(), project, home).arrange_files("rootDir", "abc123")

        assert json.loads((project / ".clasp-prod.json").read_text()) == {
            "scriptId": "abc123", "rootDir": "rootDir",
        }


@pytest.mark.unit
class TestCreate:

    def test_creates_sheets_script_and_returns_links(self, project, home):
        runner = FakeCommandRunner()
        runner.set_side_effect(_simulate_clasp_files(project))
        runner.set_result(completed(stdout=(
            "Created new document: https://docs.google.com/spreadsheets/d/sheet\n"
            "Created new script: https://script.google.com/d/script/edit\n"
        )))

        result = _helper(runner, project, home).create("My Project", "", "dist")

        assert runner.calls == [(
            "run",
            ["npx", "clasp", "create-script", "--type", "sheets", "--rootDir", "dist", "--title", "My Project"],
            str(project),
        )]
        assert result == ClaspCreateResult(
            sheet_link="https://docs.google.com/spreadsheets/d/sheet",
            script_link="https://script.google.com/d/script/edit",
        )
        assert (project / ".clasp-dev.json").exists()
        assert (project / ".clasp-prod.json").exists()
        assert (project / "appsscript.json").exists()

    def test_links_not_found_in_output(self, project, home):
        runner = FakeCommandRunner()
        runner.set_side_effect(_simulate_clasp_files(project))

        result = _helper(runner, project, home).create("x", "", "dist")

        assert result == ClaspCreateResult("Not found", "Not found")

    def test_failed_create_raises(self, project, home):
        runner = FakeCommandRunner()
        runner.set_result(completed(returncode=1, stderr="boom"))

        with pytest.raises(ClaspError):
            _helper(runner, project, home).create("x", "", "dist")


@pytest.mark.unit
class TestCloneAndPull:

    def test_writes_config_and_runs_clone_and_pull(self, project, home):
        runner = FakeCommandRunner()
        configs_seen = []

        def clone(_cmd):
            configs_seen.append(json.loads((project / "dist" / ".clasp.json").read_text()))
            (project / "dist" / "appsscript.json").write_text("{}")

        runner.set_side_effects([clone, lambda _cmd: None])

        _helper(runner, project, home).clone_and_pull("1", "2", "dist")

        assert runner.calls == [
            ("run_interactive", ["npx", "clasp", "clone"], str(project)),
            ("run_interactive", ["npx", "clasp", "pull"], str(project)),
        ]
        assert configs_seen == [{"scriptId": "1", "rootDir": "dist"}]
        assert json.loads((project / ".clasp-dev.json").read_text()) == {"scriptId": "1", "rootDir": "dist"}
        assert json.loads((project / ".clasp-prod.json").read_text()) == {"scriptId": "2", "rootDir": "dist"}
        assert (project / "appsscript.json").exists()


@pytest.mark.unit
class TestWriteConfig:

    def test_writes_clasp_json_by_default(self, project, home):
        _helper(FakeCommandRunner(), project, home).write_config("id", "dist")
        assert json.loads((project / ".clasp.json").read_text()) == {"scriptId": "id", "rootDir": "dist"}
