"""Exceptions raised by wyside operations."""


class WysideError(Exception):
    """Base class for errors reported to the user by the CLI."""


class ManifestError(WysideError):
    """package.json exists but cannot be read or parsed."""


class FileReadError(WysideError):
    """A config or template file exists but cannot be read."""


class InstallError(WysideError):
    """npm reported an error while installing packages."""


class ClaspError(WysideError):
    """A clasp command exited with a non-zero status."""
