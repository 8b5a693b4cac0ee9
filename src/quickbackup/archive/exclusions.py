"""Loading and matching of name-based exclusion patterns.

The exclusions file is plain text with one regular expression per line.
Lines are stripped, blank lines skipped, and every remaining line compiled
case-insensitively. Patterns are tested with ``re.search`` against bare
file or directory names, never against full paths.
"""
import logging
import re
from pathlib import Path

from quickbackup.archive.types import ExclusionSet
from quickbackup.exceptions import ExclusionPatternError, ExclusionsFileNotFoundError

logger = logging.getLogger(__name__)


def load_exclusions(path: Path, *, encoding: str = "utf-8-sig") -> ExclusionSet:
    """Read and compile the exclusions file.

    Args:
        path: Exclusions file (one regular expression per line)
        encoding: Text encoding of the file (utf-8-sig drops a leading BOM)

    Returns:
        ExclusionSet with one compiled pattern per non-blank line

    Raises:
        ExclusionsFileNotFoundError: If the file does not exist
        ExclusionPatternError: If any line is not a valid regular expression

    Example:
        >>> exclusions = load_exclusions(Path(".backupignore"))
        >>> exclusions.matches("__pycache__")
        True
    """
    path = Path(path)
    if not path.is_file():
        raise ExclusionsFileNotFoundError(path)

    compiled: list[re.Pattern] = []
    for line_no, raw_line in enumerate(path.read_text(encoding=encoding).splitlines(), start=1):
        pattern = raw_line.strip()
        if not pattern:
            continue
        try:
            compiled.append(re.compile(pattern, re.IGNORECASE))
        except re.error as e:
            raise ExclusionPatternError(pattern, line_no, str(e)) from e

    logger.debug(f"Loaded {len(compiled)} exclusion patterns from {path}")
    return ExclusionSet(patterns=tuple(compiled), source=path)


def is_excluded(name: str, exclusions: ExclusionSet) -> bool:
    """Check if a bare file or directory name matches any exclusion.

    Args:
        name: Bare name (no directory components)
        exclusions: Compiled exclusion patterns

    Returns:
        True if the name should be skipped
    """
    return exclusions.matches(name)


__all__ = ["load_exclusions", "is_excluded"]
