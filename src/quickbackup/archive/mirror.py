"""Mirroring of the finished archive to a secondary backup location.

This is the only recoverable step of a backup run: any failure is logged
as a warning and reported in the returned SecondaryCopyResult, the primary
archive stays as written. Uses hashlib.file_digest() (Python 3.11+) to
verify the copy.
"""
import hashlib
import logging
import shutil
from pathlib import Path

from quickbackup.archive.types import SecondaryCopyResult
from quickbackup.archive.writer import project_subfolder

logger = logging.getLogger(__name__)


def compute_file_checksum(file_path: Path) -> str:
    """Compute SHA256 checksum using hashlib.file_digest() (Python 3.11+).

    Args:
        file_path: Path to file to checksum

    Returns:
        Lowercase hexadecimal SHA256 checksum (64 characters)

    Raises:
        FileNotFoundError: If file does not exist
        PermissionError: If file cannot be read
    """
    with Path(file_path).open("rb") as f:
        digest = hashlib.file_digest(f, "sha256")
    return digest.hexdigest()


def copy_to_secondary(
    archive_path: Path,
    secondary_folder: Path,
    root: Path,
    *,
    verify: bool = True,
) -> SecondaryCopyResult:
    """Copy the archive to <secondary>/<root name>/, overwriting.

    Args:
        archive_path: Primary archive (already closed)
        secondary_folder: Secondary backup location
        root: Traversal root, names the per-project subfolder
        verify: Compare SHA256 of source and copy after copying

    Returns:
        SecondaryCopyResult; ok is False if folder creation, the copy or
        the verification failed. Never raises for OSError or an invalid path.

    Example:
        >>> result = copy_to_secondary(archive, Path("/mnt/usb"), Path.cwd())
        >>> if not result.ok:
        ...     print(result.error)
    """
    archive_path = Path(archive_path)
    destination = project_subfolder(secondary_folder, root) / archive_path.name

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(archive_path, destination)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to copy to secondary backup: {e}")
        return SecondaryCopyResult(destination=destination, ok=False, error=str(e))

    checksum = None
    if verify:
        try:
            expected = compute_file_checksum(archive_path)
            checksum = compute_file_checksum(destination)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to verify secondary copy {destination}: {e}")
            return SecondaryCopyResult(destination=destination, ok=False, error=str(e))

        if checksum != expected:
            error = (
                f"Checksum mismatch for {destination}: "
                f"expected {expected[:16]}..., got {checksum[:16]}..."
            )
            logger.warning(f"Failed to copy to secondary backup: {error}")
            return SecondaryCopyResult(
                destination=destination, ok=False, error=error, checksum=checksum
            )

    logger.info(f"Copied archive to secondary: {destination}")
    return SecondaryCopyResult(destination=destination, ok=True, checksum=checksum)


__all__ = ["compute_file_checksum", "copy_to_secondary"]
