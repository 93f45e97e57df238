"""Install npm packages that package.json does not declare yet."""

import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from wyside.command_runner import CommandRunner
from wyside.compare import compare
from wyside.errors import InstallError, ManifestError
from wyside.manifest.package_json import PackageJson


@dataclass
class InstallResult:
    """Outcome of an install: names that were requested, already present, newly added."""
    requested: List[str] = field(default_factory=list)
    resolved: List[str] = field(default_factory=list)
    installed: List[str] = field(default_factory=list)


def package_name(spec: str) -> str:
    """Strip the version range from an npm package spec.

    >>> package_name("@google/clasp@^2.5.0")
    '@google/clasp'
    >>> package_name("rimraf@^6.0.1")
    'rimraf'
    """
    separator = spec.find("@", 1)
    return spec[:separator] if separator > 0 else spec


class NpmInstaller:
    """Runs `npm install` without lifecycle scripts in a project directory."""

    def __init__(self, runner: CommandRunner, project_dir: str):
        self._runner = runner
        self._project_dir = project_dir

    def install(self, specs: Sequence[str]) -> None:
        cmd = ["npm", "install", "--ignore-scripts", "--silent"] + list(specs)
        result = self._runner.run(cmd, cwd=self._project_dir)
        if result.stderr:
            raise InstallError(result.stderr)


def install_packages(
    package_json: PackageJson,
    requested: Sequence[str],
    installer: NpmInstaller,
    loader: Optional[Callable[[str], Optional[PackageJson]]] = None,
) -> InstallResult:
    """Install the requested packages that are not yet declared.

    Both dependencies and devDependencies count as declared. After npm has
    run, package.json is reloaded from disk and becomes the content of
    package_json, so the result reflects what npm actually wrote.
    """
    loader = loader or PackageJson.load
    specs_by_name = {package_name(spec): spec for spec in requested}
    requested_names = list(specs_by_name)

    before = list(package_json.get_dependencies(include_dev=True))
    missing = compare(before, requested_names).right

    if not missing:
        return InstallResult(requested=list(requested), resolved=requested_names, installed=[])

    installer.install([specs_by_name[name] for name in missing])

    reloaded = loader(package_json.path)
    if reloaded is None:
        raise ManifestError(f"{os.path.basename(package_json.path)} not found after npm install")
    after = list(reloaded.get_dependencies(include_dev=True))
    package_json.replace_content(reloaded.get_content())

    reconciled = compare(before, after)
    return InstallResult(
        requested=list(requested),
        resolved=[name for name in reconciled.both if name in specs_by_name],
        installed=[name for name in reconciled.right if name in specs_by_name],
    )
