"""Use case: resolve seeds, then stage a self-contained bundle."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from winbundle.l1_entities.resolution import BundleReport
from winbundle.l2_use_cases.ports.bundle_assembler import BundleAssembler
from winbundle.l2_use_cases.resolve_dependencies_use_case import ResolveDependenciesUseCase


class AssembleBundleUseCase:
    """Resolution runs to completion before the assembler sees anything.

    A failed resolution raises out of ``execute`` and leaves the output
    directory untouched; there is no partial bundle.
    """

    def __init__(self, resolver: ResolveDependenciesUseCase, assembler: BundleAssembler) -> None:
        self._resolver = resolver
        self._assembler = assembler

    def execute(self, seeds: Sequence[Path], output_dir: Path) -> BundleReport:
        result = self._resolver.execute(seeds)
        return self._assembler.assemble(result, output_dir)
