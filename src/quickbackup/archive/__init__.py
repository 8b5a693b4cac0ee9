"""Archive tooling for quickbackup.

Provides exclusion loading, filtered directory traversal, zip writing and
mirroring of the finished archive to a secondary location.

Example:
    >>> from quickbackup.archive import load_exclusions, collect_files, write_archive
    >>> exclusions = load_exclusions(Path(".backupignore"))
    >>> files = collect_files(Path.cwd(), exclusions)
    >>> write_archive(files, Path.cwd(), Path("/backups/project/nightly.zip"))
"""
from quickbackup.archive.types import (
    ExclusionSet,
    SecondaryCopyResult,
    BackupResult,
)
from quickbackup.archive.exclusions import (
    load_exclusions,
    is_excluded,
)
from quickbackup.archive.collect import collect_files
from quickbackup.archive.writer import (
    ARCHIVE_SUFFIX,
    DEFAULT_COMPRESS_LEVEL,
    archive_file_name,
    project_subfolder,
    archive_destination,
    write_archive,
)
from quickbackup.archive.mirror import (
    compute_file_checksum,
    copy_to_secondary,
)

__all__ = [
    # Types
    "ExclusionSet",
    "SecondaryCopyResult",
    "BackupResult",
    # Exclusions
    "load_exclusions",
    "is_excluded",
    # Traversal
    "collect_files",
    # Writing
    "ARCHIVE_SUFFIX",
    "DEFAULT_COMPRESS_LEVEL",
    "archive_file_name",
    "project_subfolder",
    "archive_destination",
    "write_archive",
    # Secondary copy
    "compute_file_checksum",
    "copy_to_secondary",
]
