# src/quickbackup/pipeline.py
"""
The backup pipeline.

    load exclusions -> collect files -> write primary archive -> [secondary copy]

Every step except the secondary copy is fail-fast: exceptions propagate
and nothing is rolled back. The exclusions file is loaded before any
directory is created, so a missing file leaves the filesystem untouched.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from quickbackup.archive.collect import collect_files
from quickbackup.archive.exclusions import load_exclusions
from quickbackup.archive.mirror import copy_to_secondary
from quickbackup.archive.types import BackupResult
from quickbackup.archive.writer import archive_destination, write_archive
from quickbackup.config import Settings

logger = logging.getLogger(__name__)


def run_backup(
    archive_name: str,
    exclusions_file: str | Path,
    primary_folder: str | Path,
    secondary_folder: Optional[str | Path] = None,
    *,
    root: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> BackupResult:
    """
    Archive every non-excluded file under root.

    Args:
        archive_name: Archive file name; ".zip" is appended if missing
        exclusions_file: Text file with one regular expression per line
        primary_folder: Backup location; the archive goes to
            <primary_folder>/<root name>/<archive_name>.zip
        secondary_folder: Optional second location for a copy
        root: Traversal root (default: current working directory)
        settings: Archive/logging settings (default: built-in defaults)

    Returns:
        BackupResult describing the primary archive and secondary copy

    Raises:
        ExclusionsFileNotFoundError: exclusions file missing (no writes made)
        ExclusionPatternError: malformed pattern (no writes made)
        OSError: traversal or archive writing failed
    """
    settings = settings or Settings()
    opts = settings.archive
    root = Path(root or Path.cwd()).resolve()

    exclusions = load_exclusions(Path(exclusions_file), encoding=opts.exclusions_encoding)
    logger.debug(f"Using {exclusions}")

    archive_path = archive_destination(Path(primary_folder).resolve(), root, archive_name)

    files = collect_files(root, exclusions, sort_entries=opts.sort_entries)
    # the previous archive may live under root; it is about to be replaced
    files = [f for f in files if f != archive_path]

    entries = write_archive(files, root, archive_path, compress_level=opts.compress_level)
    logger.info(f"Created archive: {archive_path} ({entries} entries)")

    secondary = None
    if secondary_folder:
        secondary = copy_to_secondary(
            archive_path, Path(secondary_folder), root, verify=opts.verify_copy
        )

    return BackupResult(
        root=root,
        archive_path=archive_path,
        entries=entries,
        secondary=secondary,
    )


__all__ = ["run_backup"]
