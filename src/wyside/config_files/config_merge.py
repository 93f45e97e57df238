"""Copy and merge bundled config files into a project.

Both policies decide what would change and leave the decision whether to
apply it to a callback, so nothing in here prompts.
"""

import os
from typing import Callable, Iterable, List, Optional

from wyside.config_files.project_config import ConfigFileEntry
from wyside.file_io import atomic_write, read_text

ConfirmOverwriteFn = Callable[[str], bool]
ConfirmMergeFn = Callable[[str, List[str]], bool]


def missing_lines(template_lines: List[str], target_lines: List[str]) -> List[str]:
    """Template lines that do not occur anywhere in the target, in template order."""
    present = set(target_lines)
    return [line for line in template_lines if line not in present]


def merged_text(target_lines: List[str], missing: List[str]) -> str:
    """Append missing lines to the target, dropping empty lines."""
    lines = [line for line in target_lines + missing if line]
    return "\n".join(lines) + "\n"


def needs_copy(source: Optional[str], target: Optional[str]) -> bool:
    return source is not None and source != target


def copy_config_files(
    entries: Iterable[ConfigFileEntry],
    source_dir: str,
    target_dir: str,
    confirm_overwrite: ConfirmOverwriteFn,
) -> List[str]:
    """Copy whole files, asking before replacing a non-empty target that differs.

    Returns:
        Target paths (as listed in entries) that were written.
    """
    written = []
    for entry in entries:
        source = read_text(os.path.join(source_dir, entry.source))
        target_path = os.path.join(target_dir, entry.target)
        target = read_text(target_path)

        if not needs_copy(source, target):
            continue
        if target and not confirm_overwrite(entry.target):
            continue

        atomic_write(target_path, source)
        written.append(entry.target)
    return written


def merge_config_files(
    entries: Iterable[ConfigFileEntry],
    source_dir: str,
    target_dir: str,
    confirm_merge: ConfirmMergeFn,
) -> List[str]:
    """Append template lines missing from each target file.

    confirm_merge(target, missing_lines) is only asked when the target exists.

    Returns:
        Target paths (as listed in entries) that were written.
    """
    written = []
    for entry in entries:
        source = read_text(os.path.join(source_dir, entry.source))
        if source is None:
            continue
        target_path = os.path.join(target_dir, entry.target)
        target = read_text(target_path)
        target_lines = target.split("\n") if target is not None else []

        missing = [line for line in missing_lines(source.split("\n"), target_lines) if line]
        if not missing:
            continue
        if target is not None and not confirm_merge(entry.target, missing):
            continue

        atomic_write(target_path, merged_text(target_lines, missing))
        written.append(entry.target)
    return written
