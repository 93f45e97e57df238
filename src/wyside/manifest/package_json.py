"""PackageJson: in-memory model of a project's package.json."""

import copy
import json
import os
import re
from typing import Dict, Optional

from wyside.errors import ManifestError
from wyside.file_io import atomic_write

PACKAGE_JSON = "package.json"

DEFAULT_CONTENT = {
    "name": "",
    "version": "0.0.0",
    "description": "",
    "main": "build/index.js",
    "license": "Apache-2.0",
    "keywords": [],
    "scripts": {},
    "engines": {
        "node": ">=22",
    },
}


def normalize_name(title: str) -> str:
    """Convert a human readable title to a lowercase-dashed package name.

    >>> normalize_name("Some CoolTitle Here")
    'some-cool-title-here'
    """
    name = re.sub(r"([a-z])([A-Z])", r"\1-\2", title)
    name = re.sub(r"[\s_]+", "-", name)
    return name.lower()


class PackageJson:
    """Owns the content of one package.json file.

    Read accessors return deep copies; mutate through the update methods.
    """

    def __init__(self, content: Optional[dict] = None, path: str = PACKAGE_JSON):
        self._content = copy.deepcopy(content) if content is not None else {}
        self.path = path

    @classmethod
    def load(cls, path: str = PACKAGE_JSON) -> Optional["PackageJson"]:
        """Load package.json from path, returning None if it does not exist."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            raise ManifestError(f"Unable to open package.json file {path}: {e}") from e
        if not isinstance(content, dict):
            raise ManifestError(f"Unable to open package.json file {path}: not a JSON object")
        return cls(content, path)

    @classmethod
    def init(cls, title: str, path: str = PACKAGE_JSON) -> "PackageJson":
        """Create a package.json model from the default template."""
        package_json = cls(DEFAULT_CONTENT, path)
        package_json.update_name(title)
        return package_json

    def get_content(self) -> dict:
        return copy.deepcopy(self._content)

    def replace_content(self, content: dict) -> None:
        self._content = copy.deepcopy(content)

    @property
    def name(self) -> Optional[str]:
        return self._content.get("name")

    def update_name(self, title: str) -> str:
        self._content["name"] = normalize_name(title)
        return self._content["name"]

    def get_scripts(self) -> Dict[str, str]:
        return copy.deepcopy(self._content.get("scripts") or {})

    def update_script(self, name: str, command: str) -> Dict[str, str]:
        """Set one script, returning the updated scripts."""
        self._content.setdefault("scripts", {})[name] = command
        return self.get_scripts()

    def get_dependencies(self, include_dev: bool = False) -> Dict[str, str]:
        """Return dependencies, with devDependencies merged over them if requested."""
        dependencies = dict(self._content.get("dependencies") or {})
        if include_dev:
            dependencies.update(self._content.get("devDependencies") or {})
        return copy.deepcopy(dependencies)

    def save(self, path: Optional[str] = None) -> None:
        """Write package.json atomically with 2-space indentation."""
        target = path or self.path
        text = json.dumps(self._content, indent=2, ensure_ascii=False) + "\n"
        atomic_write(target, text)

    def __repr__(self):
        return f"PackageJson(path={os.path.basename(self.path)!r}, name={self.name!r})"
