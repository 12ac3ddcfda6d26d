"""Root search strategy: the ordered file paths at which a library may live.

Pure: nothing here touches the filesystem, so probe order can be checked
without creating files. Existence and format checks belong to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from winbundle.l1_entities.config import SearchRoot

# install-layout convention under an explicit root
SYSROOT_PREFIXES: tuple[str, ...] = ('', 'bin', 'lib')


def candidates(
    name: str,
    root: SearchRoot,
    environ: Mapping[str, str] | None = None,
) -> Iterator[Path]:
    """Yield candidate paths for library *name*, most preferred first."""
    if root.is_explicit:
        base = Path(root.sysroot)
        for prefix in SYSROOT_PREFIXES:
            yield base / prefix / name if prefix else base / name
        return

    env = os.environ if environ is None else environ
    search_path = env.get(root.path_variable)
    if search_path is None:
        yield Path.cwd() / name
        return
    for directory in search_path.split(os.pathsep):
        if directory:
            yield Path(directory) / name


class SearchStrategy:
    """Binds a search root (and environment snapshot) so callers only pass names."""

    def __init__(self, root: SearchRoot, environ: Mapping[str, str] | None = None) -> None:
        self._root = root
        self._environ = environ

    @property
    def root(self) -> SearchRoot:
        return self._root

    def candidates(self, name: str) -> Iterator[Path]:
        return candidates(name, self._root, self._environ)
