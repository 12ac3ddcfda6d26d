"""Gateway: filesystem bundle assembler — implements BundleAssembler port."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from winbundle.l1_entities.errors import OutputPathError
from winbundle.l1_entities.resolution import BundleReport, ResolutionResult

log = logging.getLogger('wb.bundle')


class FileBundleAssembler:
    """Copies resolved libraries, then the seed artifacts, into one flat directory.

    A library whose destination already exists is left alone. Seeds always
    overwrite. Nothing already copied is rolled back when a later copy fails.
    """

    def assemble(self, result: ResolutionResult, output_dir: Path) -> BundleReport:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputPathError(f'Error creating output path({output_dir}): {e}') from e

        copied: list[Path] = []
        skipped: list[Path] = []
        for src in result.paths:
            dst = output_dir / src.name
            if dst.exists():
                log.warning('File already exists, skipping: %s', dst)
                skipped.append(dst)
                continue
            _copy(src, dst)
            log.info('Copied %s', src)
            copied.append(src)

        artifacts: list[Path] = []
        for seed in result.seeds:
            dst = output_dir / seed.name
            _copy(seed, dst)
            log.info('Copied %s', seed)
            artifacts.append(dst)

        return BundleReport(output_dir=output_dir, copied=copied, skipped=skipped, artifacts=artifacts)


def _copy(src: Path, dst: Path) -> None:
    try:
        shutil.copy2(src, dst)
    except OSError as e:
        raise OutputPathError(f'Error copying {src} to {dst}: {e}') from e
