"""Install the bundled starter template into a project."""

import os
import shutil
from pathlib import Path
from typing import List

from wyside.template_renderer import render_string

STARTER_DIR = Path(__file__).parent
TEMPLATE_DIR = STARTER_DIR / "template"
TEMPLATE_UI_DIR = STARTER_DIR / "template-ui"

TEMPLATE_SUFFIX = ".j2"
SOURCE_SUFFIX = ".ts"


def template_dir_for(ui_enabled: bool) -> Path:
    return TEMPLATE_UI_DIR if ui_enabled else TEMPLATE_DIR


def has_source_files(directory: str) -> bool:
    """True if the directory directly contains TypeScript files."""
    return any(name.lower().endswith(SOURCE_SUFFIX) for name in os.listdir(directory))


def install_template(template_dir, project_dir: str, title: str) -> List[str]:
    """Copy each top-level template directory into the project.

    A directory that already holds TypeScript files is left alone. Existing
    files are never overwritten; files ending in .j2 are rendered with the
    project title and written without the suffix.

    Returns:
        Names of the template directories that were installed.
    """
    installed = []
    for item in sorted(os.listdir(template_dir)):
        source = os.path.join(template_dir, item)
        if not os.path.isdir(source):
            continue
        target = os.path.join(project_dir, item)
        os.makedirs(target, exist_ok=True)

        if has_source_files(target):
            continue

        _copy_tree(source, target, title)
        installed.append(item)
    return installed


def _copy_tree(source_root: str, target_root: str, title: str):
    for dirpath, _dirnames, filenames in os.walk(source_root):
        relative = os.path.relpath(dirpath, source_root)
        target_dir = os.path.normpath(os.path.join(target_root, relative))
        os.makedirs(target_dir, exist_ok=True)
        for filename in filenames:
            _copy_file(os.path.join(dirpath, filename), target_dir, filename, title)


def _copy_file(source_path: str, target_dir: str, filename: str, title: str):
    render = filename.endswith(TEMPLATE_SUFFIX)
    if render:
        filename = filename[:-len(TEMPLATE_SUFFIX)]
    target_path = os.path.join(target_dir, filename)
    if os.path.exists(target_path):
        return
    if render:
        with open(source_path, "r", encoding="utf-8") as f:
            content = render_string(f.read(), title=title)
        with open(target_path, "w", encoding="utf-8") as f:
            f.write(content)
    else:
        shutil.copy2(source_path, target_path)
