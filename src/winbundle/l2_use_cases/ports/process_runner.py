"""Port: external process execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Runs a command to completion and captures its output."""

    def run(self, argv: list[str]) -> ProcessResult:
        """Run *argv*. Raises BackendError if the process cannot be launched."""
        ...
