"""Port: binary inspection — reports a binary's format and imported libraries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from winbundle.l1_entities.dependency import InspectionResult


class BinaryInspector(Protocol):
    """Abstract binary inspector. Zero tool-specific output leaks through."""

    def inspect(self, path: Path) -> InspectionResult:
        """Inspect *path*. Raises an InspectionError subclass on failure."""
        ...
