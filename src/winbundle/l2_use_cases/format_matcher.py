"""Format matching: every binary in a run must share one format tag."""

from __future__ import annotations

import logging

from winbundle.l1_entities.config import UnknownFormatPolicy

log = logging.getLogger('wb.resolve')


def matches(
    required: str,
    candidate: str,
    unknown: UnknownFormatPolicy = UnknownFormatPolicy.ACCEPT,
) -> bool:
    """Exact, case-sensitive tag comparison. An empty tag on either side is decided by *unknown*."""
    if not required or not candidate:
        return unknown is UnknownFormatPolicy.ACCEPT
    return required == candidate


class FormatMatcher:
    """Holds the format tag of one resolution run.

    The first binary reporting a known tag fixes it, seeds first; it never
    changes afterwards.
    """

    def __init__(self, unknown: UnknownFormatPolicy = UnknownFormatPolicy.ACCEPT) -> None:
        self._unknown = unknown
        self._required = ''

    @property
    def required(self) -> str:
        return self._required

    def establish(self, tag: str) -> bool:
        """Check a seed's tag, adopting it as the run's tag if none is set yet."""
        if not self._required and tag:
            self._required = tag
            log.debug('Run format established: %s', tag)
            return True
        if not tag:
            log.warning('Unknown binary format; cannot verify it is %s', self._required or 'consistent')
            return self._unknown is UnknownFormatPolicy.ACCEPT
        return matches(self._required, tag, self._unknown)

    def accepts(self, tag: str) -> bool:
        """Check a dependency candidate's tag.

        While no seed has fixed the run's tag, the first candidate with a known
        tag fixes it and every later candidate must match.
        """
        if not self._required and tag:
            self._required = tag
            log.debug('Run format established by dependency: %s', tag)
            return True
        ok = matches(self._required, tag, self._unknown)
        if ok and not tag:
            log.warning('Accepting binary of unknown format (run format: %s)', self._required or 'unknown')
        return ok
