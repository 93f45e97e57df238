"""File I/O helpers: atomic writes and reads that treat a missing file as absent."""

import os
import stat
import tempfile
from typing import Optional

from wyside.errors import FileReadError


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _target_mode(file_path: str) -> int:
    """Mode of the existing file, or 0666 less the umask for a new one."""
    try:
        return stat.S_IMODE(os.stat(file_path).st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename.

    The file keeps its permissions when it already exists.
    """
    dir_name = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(dir_name, exist_ok=True)
    mode = _target_mode(file_path)
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


def read_text(file_path: str) -> Optional[str]:
    """Return the file's text, or None if it does not exist.

    Raises:
        FileReadError: For any failure other than the file being absent.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Unknown error reading {file_path}: {e}") from e
