"""Domain error types.

Every run-level failure derives from :class:`BundleError` and carries the
process exit code the CLI reports for it.
"""

from __future__ import annotations

from pathlib import Path


class BundleError(Exception):
    """Base class for failures that abort a resolution or bundle run."""

    exit_code: int = 1


class InspectionError(BundleError):
    """Raised when a binary cannot be inspected for its dependencies."""


class ArtifactNotFoundError(InspectionError):
    exit_code = 3

    def __init__(self, path: Path) -> None:
        super().__init__(f'No such file: {path}')
        self.path = path


class NotAFileError(InspectionError):
    exit_code = 4

    def __init__(self, path: Path) -> None:
        super().__init__(f'Not a file: {path}')
        self.path = path


class InspectionFailedError(InspectionError):
    """All inspector backends failed for one file; the primary backend's error leads."""

    exit_code = 5

    def __init__(self, path: Path, errors: list[str]) -> None:
        self.path = path
        self.errors = list(errors)
        self.primary_error = errors[0] if errors else 'no inspector backend configured'
        super().__init__(f'Cannot inspect {path}: {self.primary_error}')


class FormatMismatchError(BundleError):
    """Two seed artifacts report different format tags."""

    exit_code = 6

    def __init__(self, path: Path, expected: str, actual: str) -> None:
        super().__init__(f"We don't support mixed binaries ({path}: {actual} vs {expected})")
        self.path = path
        self.expected = expected
        self.actual = actual


class UnresolvedDependencyError(BundleError):
    exit_code = 7

    def __init__(self, name: str, probed: list[Path] | None = None) -> None:
        super().__init__(f'Unable to find {name}')
        self.name = name
        self.probed = list(probed or [])


class OutputPathError(BundleError):
    """Output directory could not be created or a file could not be copied into it."""

    exit_code = 8


class ConfigError(BundleError):
    exit_code = 9


class BackendError(Exception):
    """A single inspector backend failed. Recoverable: the next backend is tried."""
