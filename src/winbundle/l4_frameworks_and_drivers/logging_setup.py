"""Console and file logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from winbundle.l1_entities.errors import OutputPathError

_ROOT_LOGGER = 'wb'


def verbosity_level(verbose: int, quiet: int) -> int:
    if quiet >= 1:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_console_logging(level: int) -> logging.Logger:
    """Send diagnostics to stderr so stdout stays a clean list of paths."""
    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(level)
    root.propagate = False

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(message)s'))

    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.addHandler(handler)
    return root


def setup_file_logging(log_path: Path) -> None:
    """Configure file-based debug logging. Call after setup_console_logging."""
    try:
        handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError as e:
        raise OutputPathError(f'Cannot open log file {log_path}: {e}') from e
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.info('Debug logging started → %s', log_path)
