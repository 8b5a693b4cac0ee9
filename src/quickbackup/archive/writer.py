"""Zip archive creation at the per-project destination."""
import logging
import os
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"

# Best standard deflate setting
DEFAULT_COMPRESS_LEVEL = 9


def archive_file_name(archive_name: str) -> str:
    """Append the .zip suffix unless already present (case-insensitive).

    Example:
        >>> archive_file_name("nightly")
        'nightly.zip'
        >>> archive_file_name("nightly.ZIP")
        'nightly.ZIP'
    """
    if archive_name.lower().endswith(ARCHIVE_SUFFIX):
        return archive_name
    return archive_name + ARCHIVE_SUFFIX


def project_subfolder(base: Path, root: Path) -> Path:
    """Per-project folder under a backup location, named after root."""
    return Path(base) / Path(os.path.abspath(root)).name


def archive_destination(primary_folder: Path, root: Path, archive_name: str) -> Path:
    """Full path of the primary archive: <primary>/<root name>/<name>.zip."""
    return project_subfolder(primary_folder, root) / archive_file_name(archive_name)


def write_archive(
    files: list[Path],
    root: Path,
    archive_path: Path,
    *,
    compress_level: int = DEFAULT_COMPRESS_LEVEL,
) -> int:
    """Write files into a fresh zip archive.

    Creates the destination folder if needed and deletes any existing file
    at archive_path first. Entry names are paths relative to root. A failure
    part-way through propagates and leaves the partial file on disk.

    Args:
        files: Absolute paths of files to archive (all below root)
        root: Traversal root used for relative entry names
        archive_path: Destination .zip path
        compress_level: Deflate level (0-9)

    Returns:
        Number of entries written

    Raises:
        OSError: If a file cannot be read or the archive cannot be written
    """
    root = Path(os.path.abspath(root))
    archive_path = Path(archive_path)
    archive_path.parent.mkdir(parents=True, exist_ok=True)

    if archive_path.exists():
        logger.info(f"Replacing existing archive {archive_path}")
        archive_path.unlink()

    count = 0
    with zipfile.ZipFile(
        archive_path,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=compress_level,
        strict_timestamps=False,  # pre-1980 mtimes are clamped to 1980-01-01
    ) as zf:
        for file_path in files:
            entry_name = Path(os.path.abspath(file_path)).relative_to(root).as_posix()
            zf.write(file_path, arcname=entry_name)
            count += 1

    return count


__all__ = [
    "ARCHIVE_SUFFIX",
    "DEFAULT_COMPRESS_LEVEL",
    "archive_file_name",
    "project_subfolder",
    "archive_destination",
    "write_archive",
]
