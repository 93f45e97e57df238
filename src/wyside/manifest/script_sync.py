"""Merge a table of npm scripts into package.json."""

from typing import Callable, Dict

from wyside.manifest.package_json import PackageJson

ConflictFn = Callable[[str, str, str], bool]


def sync_scripts(package_json: PackageJson, target_scripts: Dict[str, str], on_conflict: ConflictFn) -> bool:
    """Add missing scripts and resolve differing ones through on_conflict.

    Args:
        package_json: Manifest to update in place.
        target_scripts: Mapping of script name to desired command.
        on_conflict: Callable(name, current, desired) -> bool; True replaces
            the current command.

    Returns:
        True if any script was added or replaced.
    """
    modified = False
    current_scripts = package_json.get_scripts()

    for name, desired in target_scripts.items():
        current = current_scripts.get(name)
        if current == desired:
            continue
        if current is not None and not on_conflict(name, current, desired):
            continue
        package_json.update_script(name, desired)
        modified = True

    return modified
