"""Gateway: subprocess runner — implements ProcessRunner port."""

from __future__ import annotations

import logging
import subprocess  # noqa: S404 -- intentional: runs inspector tools with a fixed arg list, not shell=True

from winbundle.l1_entities.errors import BackendError
from winbundle.l2_use_cases.ports.process_runner import ProcessResult

log = logging.getLogger('wb.inspect')


class SubprocessRunner:
    """Runs a command and captures its output, decoding it lossily as UTF-8."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, argv: list[str]) -> ProcessResult:
        log.debug('Running %s', ' '.join(argv))
        try:
            proc = subprocess.run(argv, capture_output=True, timeout=self._timeout, check=False)  # noqa: S603
        except subprocess.TimeoutExpired as exc:
            raise BackendError(f'{argv[0]} timed out after {self._timeout}s') from exc
        except OSError as exc:
            raise BackendError(f'Failed to execute {argv[0]}: {exc}') from exc
        return ProcessResult(
            returncode=proc.returncode,
            stdout=proc.stdout.decode('utf-8', errors='replace'),
            stderr=proc.stderr.decode('utf-8', errors='replace'),
        )
