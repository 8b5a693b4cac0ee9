# src/quickbackup/__init__.py
"""
quickbackup: zip the current directory into a per-project backup folder.

    >>> from quickbackup import run_backup
    >>> result = run_backup("nightly", ".backupignore", "/backups", "/mnt/usb")
    >>> print(result)
"""
__version__ = "0.1.0"

from quickbackup.exceptions import (  # noqa: E402
    BackupError,
    ExclusionPatternError,
    ExclusionsFileNotFoundError,
)
from quickbackup.pipeline import run_backup  # noqa: E402

__all__ = [
    "__version__",
    "BackupError",
    "ExclusionPatternError",
    "ExclusionsFileNotFoundError",
    "run_backup",
]
