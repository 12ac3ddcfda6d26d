"""Resolution and bundle outcome entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from winbundle.l1_entities.dependency import ResolvedLibrary


@dataclass(frozen=True)
class ResolutionResult:
    """The dependency closure of a set of seed artifacts.

    ``libraries`` maps each dependency name (case as first seen) to the file
    it resolved to, in resolution order.
    """

    format_tag: str
    libraries: dict[str, Path]
    seeds: list[Path] = field(default_factory=list)

    @property
    def resolved(self) -> list[ResolvedLibrary]:
        return [ResolvedLibrary(name=name, path=path) for name, path in self.libraries.items()]

    @property
    def paths(self) -> list[Path]:
        return list(self.libraries.values())


@dataclass(frozen=True)
class BundleReport:
    output_dir: Path
    copied: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    artifacts: list[Path] = field(default_factory=list)
