"""Gateway: MSVC dumpbin inspector backend (``dumpbin /dependents``).

dumpbin's dependents listing carries no format information, so results from
this backend always have an unknown (empty) format tag.
"""

from __future__ import annotations

from pathlib import Path

from winbundle.l1_entities.dependency import InspectionResult
from winbundle.l1_entities.errors import BackendError
from winbundle.l2_use_cases.ports.process_runner import ProcessRunner

_INDENT = '    '


def parse_dumpbin_output(output: str) -> InspectionResult:
    deps: list[str] = []
    for line in output.splitlines():
        # dependents are listed indented by four spaces
        if line.startswith(_INDENT):
            xline = line.strip()
            if xline.lower().endswith('.dll'):
                deps.append(xline)
    return InspectionResult(format_tag='', dependencies=deps)


class DumpbinBackend:
    name = 'dumpbin'

    def __init__(self, runner: ProcessRunner, executable: str = 'dumpbin') -> None:
        self._runner = runner
        self._executable = executable

    def inspect(self, path: Path) -> InspectionResult:
        result = self._runner.run([self._executable, '/dependents', str(path)])
        if not result.ok:
            raise BackendError(f'Error executing dumpbin({result.returncode}): {result.stderr.strip()}')
        return parse_dumpbin_output(result.stdout)
