"""Depth-first collection of the files that go into a backup.

Pruning rules:
- The traversal root's own name is never tested.
- Files at every level are tested by bare name.
- A directory below the root whose bare name matches prunes its whole
  subtree; nothing inside it is tested.
- Symlinked directories are followed unless they point back at a
  directory already on the current path (a loop).
- Files of a directory are collected before its subdirectories are visited.
"""
import logging
import os
from pathlib import Path

from quickbackup.archive.exclusions import is_excluded
from quickbackup.archive.types import ExclusionSet

logger = logging.getLogger(__name__)


def _list_dir(directory: Path, sort_entries: bool) -> tuple[list[os.DirEntry], list[os.DirEntry]]:
    """Split a directory listing into (files, subdirectories)."""
    with os.scandir(directory) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda e: e.name)

    files: list[os.DirEntry] = []
    dirs: list[os.DirEntry] = []
    for entry in entries:
        # symlinks to directories count as directories
        if entry.is_dir():
            dirs.append(entry)
        else:
            files.append(entry)
    return files, dirs


def _collect(
    directory: Path,
    exclusions: ExclusionSet,
    out: list[Path],
    sort_entries: bool,
    ancestors: frozenset[str],
) -> None:
    files, dirs = _list_dir(directory, sort_entries)

    for entry in files:
        if is_excluded(entry.name, exclusions):
            logger.debug(f"Excluded file: {entry.path}")
            continue
        out.append(Path(entry.path))

    for entry in dirs:
        if is_excluded(entry.name, exclusions):
            logger.debug(f"Excluded directory: {entry.path}")
            continue
        real = os.path.realpath(entry.path)
        if real in ancestors:
            logger.warning(f"Skipping directory symlink loop: {entry.path} -> {real}")
            continue
        _collect(Path(entry.path), exclusions, out, sort_entries, ancestors | {real})


def collect_files(
    root: Path,
    exclusions: ExclusionSet,
    *,
    sort_entries: bool = True,
) -> list[Path]:
    """Collect every non-excluded file below root.

    Args:
        root: Traversal root; its own name is never tested
        exclusions: Compiled exclusion patterns
        sort_entries: Visit directory entries sorted by name (reproducible
            archives). If False, the raw os.scandir() order is used.

    Returns:
        Absolute file paths in depth-first order, each exactly once

    Raises:
        OSError: If a directory cannot be listed

    Example:
        >>> files = collect_files(Path.cwd(), load_exclusions(Path(".backupignore")))
        >>> print(f"{len(files)} files to archive")
    """
    root = Path(os.path.abspath(root))
    files: list[Path] = []
    _collect(root, exclusions, files, sort_entries, frozenset({os.path.realpath(root)}))
    logger.info(f"Collected {len(files)} files under {root}")
    return files


__all__ = ["collect_files"]
