"""Shared fixtures for init-cmd tests."""

import json

import pytest

from fake_command_runner import FakeCommandRunner


@pytest.fixture
def project_dir(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path):
    """A home directory holding clasp credentials, so login is skipped."""
    path = tmp_path / "home"
    path.mkdir()
    (path / ".clasprc.json").write_text(json.dumps({"token": {}}))
    return path


@pytest.fixture
def runner():
    return FakeCommandRunner()
