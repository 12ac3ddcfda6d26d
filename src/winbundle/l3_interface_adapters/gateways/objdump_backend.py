"""Gateway: GNU objdump inspector backend (``objdump -p``)."""

from __future__ import annotations

from pathlib import Path

from winbundle.l1_entities.dependency import InspectionResult
from winbundle.l1_entities.errors import BackendError
from winbundle.l2_use_cases.ports.process_runner import ProcessRunner

_DLL_PREFIX = 'DLL Name:'
_NEEDED_PREFIX = 'NEEDED'


def parse_objdump_output(output: str, path: str) -> InspectionResult:
    """Extract format tag and imported libraries from ``objdump -p`` output.

    The format tag is the last token of the file's own descriptor line
    (``app.exe:     file format pei-x86-64``). Imports come from PE
    ``DLL Name:`` lines and ELF ``NEEDED`` lines, in file order.
    """
    format_tag: str | None = None
    deps: list[str] = []
    for line in output.splitlines():
        xline = line.strip()
        if xline.startswith(_DLL_PREFIX):
            dll = xline[len(_DLL_PREFIX) :].strip()
            if dll:
                deps.append(dll)
        elif xline.startswith(_NEEDED_PREFIX + ' ') or xline.startswith(_NEEDED_PREFIX + '\t'):
            needed = xline[len(_NEEDED_PREFIX) :].strip()
            if needed:
                deps.append(needed)
        elif format_tag is None and xline.startswith(path + ':'):
            tokens = xline.split(':')[-1].split()
            format_tag = tokens[-1] if tokens else ''

    if format_tag is None:
        raise BackendError(f'objdump output has no descriptor line for {path}')
    return InspectionResult(format_tag=format_tag, dependencies=deps)


class ObjdumpBackend:
    name = 'objdump'

    def __init__(self, runner: ProcessRunner, executable: str = 'objdump') -> None:
        self._runner = runner
        self._executable = executable

    def inspect(self, path: Path) -> InspectionResult:
        result = self._runner.run([self._executable, '-p', str(path)])
        if not result.ok:
            raise BackendError(f'Error executing objdump({result.returncode}): {result.stderr.strip()}')
        return parse_objdump_output(result.stdout, str(path))
