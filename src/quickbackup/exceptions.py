# src/quickbackup/exceptions.py


class BackupError(Exception):
    """Base class for all backup-related errors."""

    pass


class ExclusionsFileNotFoundError(BackupError):
    """Raised when the exclusions file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Exclusions file not found: {path}")


class ExclusionPatternError(BackupError):
    """Raised when a line of the exclusions file is not a valid regular expression."""

    def __init__(self, pattern: str, line_no: int, reason: str):
        self.pattern = pattern
        self.line_no = line_no
        self.reason = reason
        super().__init__(
            f"Invalid exclusion pattern on line {line_no}: {pattern!r} ({reason})"
        )
