"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from winbundle.l1_entities.config import AppConfig, SearchRoot
from winbundle.l1_entities.dependency import InspectionResult, SystemLibrarySet
from winbundle.l1_entities.errors import ArtifactNotFoundError, BackendError, InspectionFailedError
from winbundle.l2_use_cases.ports.process_runner import ProcessResult
from winbundle.l2_use_cases.search_strategy import SearchStrategy
from winbundle.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeInspector:
    """Fake binary inspector returning canned results per path."""

    def __init__(self, graph: dict[Path, InspectionResult] | None = None):
        self._graph = dict(graph or {})
        self.calls: list[Path] = []

    def inspect(self, path: Path) -> InspectionResult:
        self.calls.append(path)
        if not path.exists():
            raise ArtifactNotFoundError(path)
        if path not in self._graph:
            raise InspectionFailedError(path, [f'no canned result for {path}'])
        return self._graph[path]

    def add(self, path: Path, format_tag: str, deps: list[str] | None = None) -> Path:
        """Create *path* on disk and register its canned inspection result."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b'MZ')
        self._graph[path] = InspectionResult(format_tag=format_tag, dependencies=list(deps or []))
        return path


class RecordingSearch(SearchStrategy):
    """Search strategy that remembers which names were looked up."""

    def __init__(self, root: SearchRoot, environ: dict[str, str] | None = None):
        super().__init__(root, environ)
        self.names: list[str] = []

    def candidates(self, name: str):
        self.names.append(name)
        return super().candidates(name)


class FakeProcessRunner:
    """Fake process runner: scripted results keyed by executable name."""

    def __init__(self, results: dict[str, ProcessResult | Exception] | None = None):
        self._results = dict(results or {})
        self.calls: list[list[str]] = []

    def run(self, argv: list[str]) -> ProcessResult:
        self.calls.append(list(argv))
        result = self._results.get(argv[0])
        if result is None:
            raise BackendError(f'Failed to execute {argv[0]}: not installed')
        if isinstance(result, Exception):
            raise result
        return result

    def set_result(self, executable: str, result: ProcessResult | Exception) -> None:
        self._results[executable] = result


class FakeBundleAssembler:
    def __init__(self):
        self.calls: list[tuple[object, Path]] = []

    def assemble(self, result, output_dir: Path):
        from winbundle.l1_entities.resolution import BundleReport  # noqa: PLC0415

        self.calls.append((result, output_dir))
        return BundleReport(output_dir=output_dir, copied=result.paths)


def objdump_pe_output(path: str, dlls: list[str], fmt: str = 'pei-x86-64') -> str:
    lines = ['', f'{path}:     file format {fmt}', '', 'Characteristics 0x22', '', 'The Import Tables:']
    for dll in dlls:
        lines += [f'\tDLL Name: {dll}', '\tvma:  Hint/Ord Member-Name Bound-To', '\t2a1b4     0  SomeSymbol', '']
    return '\n'.join(lines) + '\n'


# --- Standard Fixtures ---


@pytest.fixture
def sysroot(tmp_path: Path) -> Path:
    d = tmp_path / 'sysroot'
    d.mkdir()
    return d


@pytest.fixture
def fake_inspector() -> FakeInspector:
    return FakeInspector()


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def system_libs() -> SystemLibrarySet:
    return SystemLibrarySet(['kernel32.dll', 'sys1.dll'])


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
system_libs:
  - kernel32.dll
  - user32.dll
search:
  sysroot: "/opt/mingw64"
inspector:
  backends: [dumpbin]
  timeout: 30
format:
  unknown: reject
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture(autouse=True)
def _restore_wb_logger():
    """CLI and logging tests reconfigure the 'wb' logger; undo that so caplog keeps working."""
    root = logging.getLogger('wb')
    saved_level, saved_handlers, saved_propagate = root.level, list(root.handlers), root.propagate
    yield
    for h in root.handlers:
        if h not in saved_handlers:
            h.close()
    root.setLevel(saved_level)
    root.handlers[:] = saved_handlers
    root.propagate = saved_propagate
