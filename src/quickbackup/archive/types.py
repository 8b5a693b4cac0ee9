"""Type definitions for backup operations.

Provides the exclusion set used during traversal and the result records
returned by the backup pipeline.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ExclusionSet:
    """Ordered, immutable collection of compiled exclusion patterns.

    Matching is existential: a name is excluded as soon as any pattern
    matches anywhere inside it, so pattern order never changes the result.

    Attributes:
        patterns: Compiled, case-insensitive regular expressions
        source: File the patterns were loaded from (None if built in code)

    Example:
        >>> exclusions = ExclusionSet.from_strings(["^secret$", "node_modules"])
        >>> exclusions.matches("Node_Modules")
        True
        >>> exclusions.matches("secrets")
        False
    """
    patterns: tuple[re.Pattern, ...] = ()
    source: Optional[Path] = None

    @classmethod
    def from_strings(cls, patterns: list[str], source: Optional[Path] = None) -> "ExclusionSet":
        """Compile raw pattern strings (already stripped, non-blank)."""
        return cls(
            patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
            source=source,
        )

    def matches(self, name: str) -> bool:
        """Return True if any pattern matches the bare name."""
        return any(p.search(name) for p in self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    def __str__(self) -> str:
        origin = self.source if self.source is not None else "<inline>"
        return f"ExclusionSet({origin}: {len(self.patterns)} patterns)"


@dataclass
class SecondaryCopyResult:
    """Outcome of mirroring the archive to the secondary location.

    Attributes:
        destination: Path the copy was (or would have been) written to
        ok: True if the copy completed (and verified, when requested)
        error: Failure reason when ok is False
        checksum: SHA256 of the copied file when verification ran
    """
    destination: Path
    ok: bool
    error: Optional[str] = None
    checksum: Optional[str] = None


@dataclass
class BackupResult:
    """Result of one backup run.

    Attributes:
        root: Traversal root (the working directory at start)
        archive_path: Primary archive that was written
        entries: Number of files added to the archive
        secondary: Secondary copy outcome (None if not requested)

    Example:
        >>> print(result)
        Backup Result:
          Root: /home/me/project
          Archive: /backups/project/nightly.zip
          Entries: 42
          Secondary: /mnt/usb/project/nightly.zip
    """
    root: Path
    archive_path: Path
    entries: int
    secondary: Optional[SecondaryCopyResult] = field(default=None)

    @property
    def secondary_ok(self) -> bool:
        """True when no secondary copy was requested or it succeeded."""
        return self.secondary is None or self.secondary.ok

    def __str__(self) -> str:
        """Human-readable summary."""
        if self.secondary is None:
            secondary = "not requested"
        elif self.secondary.ok:
            secondary = str(self.secondary.destination)
        else:
            secondary = f"FAILED ({self.secondary.error})"
        return (
            f"Backup Result:\n"
            f"  Root: {self.root}\n"
            f"  Archive: {self.archive_path}\n"
            f"  Entries: {self.entries}\n"
            f"  Secondary: {secondary}"
        )


__all__ = ["ExclusionSet", "SecondaryCopyResult", "BackupResult"]
