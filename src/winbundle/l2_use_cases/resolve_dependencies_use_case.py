"""Use case: compute the transitive DLL closure of a set of seed artifacts."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from pathlib import Path

from winbundle.l1_entities.config import UnknownFormatPolicy
from winbundle.l1_entities.dependency import SystemLibrarySet, name_key
from winbundle.l1_entities.errors import FormatMismatchError, InspectionError, UnresolvedDependencyError
from winbundle.l1_entities.resolution import ResolutionResult
from winbundle.l2_use_cases.format_matcher import FormatMatcher
from winbundle.l2_use_cases.ports.binary_inspector import BinaryInspector
from winbundle.l2_use_cases.search_strategy import SearchStrategy

log = logging.getLogger('wb.resolve')


class ResolveDependenciesUseCase:
    """Expands seed artifacts into the full set of libraries they need.

    Work is driven by a FIFO queue plus a seen-set rather than recursion, so
    cyclic or very deep graphs terminate: a name is marked seen before it is
    enqueued and is never enqueued again. All seeds are inspected before any
    library search, so a seed with a foreign format fails the run before the
    filesystem is probed.
    """

    def __init__(
        self,
        inspector: BinaryInspector,
        search: SearchStrategy,
        system_libs: SystemLibrarySet | None = None,
        unknown_format: UnknownFormatPolicy = UnknownFormatPolicy.ACCEPT,
    ) -> None:
        self._inspector = inspector
        self._search = search
        self._system_libs = system_libs if system_libs is not None else SystemLibrarySet()
        self._unknown_format = unknown_format

    def execute(self, seeds: Sequence[Path]) -> ResolutionResult:
        matcher = FormatMatcher(self._unknown_format)
        queue: deque[str] = deque()
        seen: set[str] = set()

        for seed in seeds:
            info = self._inspector.inspect(seed)
            if not matcher.establish(info.format_tag):
                raise FormatMismatchError(seed, expected=matcher.required, actual=info.format_tag)
            log.info('%s: format %s, %d direct dependencies', seed, info.format_tag or '?', len(info.dependencies))
            self._enqueue(info.dependencies, queue, seen)

        libraries: dict[str, Path] = {}
        resolved_keys: set[str] = set()
        while queue:
            name = queue.popleft()
            key = name_key(name)
            if key in resolved_keys:
                continue
            path, dependencies = self._locate(name, matcher)
            libraries[name] = path
            resolved_keys.add(key)
            log.info('Resolved %s -> %s', name, path)
            self._enqueue(dependencies, queue, seen)

        return ResolutionResult(format_tag=matcher.required, libraries=libraries, seeds=list(seeds))

    def _enqueue(self, names: Iterable[str], queue: deque[str], seen: set[str]) -> None:
        for name in names:
            if name in self._system_libs:
                log.debug('Skipping system library %s', name)
                continue
            key = name_key(name)
            if key in seen:
                continue
            seen.add(key)
            queue.append(name)

    def _locate(self, name: str, matcher: FormatMatcher) -> tuple[Path, list[str]]:
        """Return the first candidate for *name* that inspects cleanly with the run's format."""
        probed: list[Path] = []
        for candidate in self._search.candidates(name):
            probed.append(candidate)
            if not candidate.is_file():
                log.debug('Not found: %s', candidate)
                continue
            try:
                info = self._inspector.inspect(candidate)
            except InspectionError as e:
                log.warning('Skipping %s: %s', candidate, e)
                continue
            if not matcher.accepts(info.format_tag):
                log.warning('Skipping %s (%s != %s)', candidate, info.format_tag or '?', matcher.required or '?')
                continue
            return candidate, info.dependencies

        raise UnresolvedDependencyError(name, probed)
