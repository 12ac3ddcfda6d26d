"""Port: bundle assembly — stages resolved libraries and seeds into a directory."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from winbundle.l1_entities.resolution import BundleReport, ResolutionResult


class BundleAssembler(Protocol):
    def assemble(self, result: ResolutionResult, output_dir: Path) -> BundleReport:
        """Copy every resolved library and seed artifact into *output_dir*."""
        ...
