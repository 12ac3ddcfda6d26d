"""Dependency entities: inspection results, resolved libraries, system library sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, Field


def name_key(name: str) -> str:
    """Comparison key for a dependency name. DLL names are case-insensitive."""
    return name.casefold()


class InspectionResult(BaseModel):
    """What an inspector backend reports for one binary."""

    format_tag: str = Field(default='', description="Binary format, e.g. 'pei-x86-64'; '' when unknown")
    dependencies: list[str] = Field(default_factory=list, description='Imported library names in file order')


class ResolvedLibrary(BaseModel):
    name: str
    path: Path


class SystemLibrarySet:
    """Library names provided by the target platform itself; never resolved or bundled."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: dict[str, str] = {name_key(n): n for n in names}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_key(name) in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f'SystemLibrarySet({sorted(self._names.values())!r})'
