"""Gateway: binary inspector with backend fallback — implements BinaryInspector port."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from winbundle.l1_entities.dependency import InspectionResult
from winbundle.l1_entities.errors import (
    ArtifactNotFoundError,
    BackendError,
    InspectionFailedError,
    NotAFileError,
)

log = logging.getLogger('wb.inspect')


class InspectorBackend(Protocol):
    name: str

    def inspect(self, path: Path) -> InspectionResult:
        """Inspect *path* with one tool. Raises BackendError on any failure."""
        ...


class FallbackBinaryInspector:
    """Tries each backend in order until one succeeds.

    Backend failures (tool missing, non-zero exit, unparsable output) are
    logged at debug level and fall through to the next backend. Only when all
    of them fail does inspection fail, reporting the primary backend's error.
    """

    def __init__(self, backends: Sequence[InspectorBackend]) -> None:
        self._backends = list(backends)

    @property
    def backend_names(self) -> list[str]:
        return [b.name for b in self._backends]

    def inspect(self, path: Path) -> InspectionResult:
        if not path.exists():
            raise ArtifactNotFoundError(path)
        if not path.is_file():
            raise NotAFileError(path)

        errors: list[str] = []
        for backend in self._backends:
            try:
                result = backend.inspect(path)
            except BackendError as e:
                log.debug('%s failed on %s: %s', backend.name, path, e)
                errors.append(str(e))
                continue
            log.debug('%s: %s -> %s %s', backend.name, path, result.format_tag or '?', result.dependencies)
            return result

        raise InspectionFailedError(path, errors)
