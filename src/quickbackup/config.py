# src/quickbackup/config.py
"""
Configuration loader for quickbackup.

- Reads an optional YAML file (explicit path or $QUICKBACKUP_CONFIG)
- Converts nested mappings into typed dataclasses
- Supports safe forward-compatibility (unknown keys ignored)
- Applies environment overrides (QUICKBACKUP_LOG_LEVEL, QUICKBACKUP_COMPRESS_LEVEL)

None of these settings change *which* files are archived; they only tune
logging and archive mechanics. With no file at all the defaults are used.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import os
import yaml


CONFIG_ENV_VAR = "QUICKBACKUP_CONFIG"


# -----------------------------
# Small, typed sub-configs
# -----------------------------
@dataclass
class ArchiveSettings:
    """Archive writing and secondary-copy options."""
    compress_level: int = 9            # 0 (store) .. 9 (best)
    sort_entries: bool = True          # False => raw os.scandir() order
    verify_copy: bool = True           # checksum the secondary copy
    exclusions_encoding: str = "utf-8-sig"


@dataclass
class LoggingSettings:
    """Console / file logging options."""
    level: str = "INFO"
    file: str | None = None
    quiet: bool = False
    debug: bool = False


# -----------------------------
# Top-level Settings
# -----------------------------
@dataclass
class Settings:
    """
    Root configuration object for quickbackup.
    This dataclass holds everything parsed from YAML.
    """
    archive: ArchiveSettings = field(default_factory=ArchiveSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# -----------------------------
# Helpers
# -----------------------------
def _as(obj: Any, cls: Any):
    """
    Minimal 'constructor' to turn a dict into a dataclass instance.
    Ignores unknown keys so YAML can be slightly ahead of code.
    """
    if obj is None or isinstance(obj, cls):
        return obj if obj is not None else cls()
    if isinstance(obj, dict):
        hints = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in obj.items() if k in hints})
    return cls()


def load_settings(yaml_path: str | Path | None = None) -> Settings:
    """
    Load YAML into Settings and apply environment overrides.

    Resolution order for the file:
      1) explicit yaml_path
      2) $QUICKBACKUP_CONFIG
      3) none -> defaults

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist
        ValueError: If compress_level is outside 0..9
    """
    path = yaml_path or os.getenv(CONFIG_ENV_VAR)
    data: dict[str, Any] = {}
    if path:
        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(f"Configuration file not found: {p}")
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    archive = _as(data.get("archive"), ArchiveSettings)
    log = _as(data.get("logging"), LoggingSettings)

    # --- Environment variable overrides ---
    if os.getenv("QUICKBACKUP_LOG_LEVEL"):
        log.level = os.getenv("QUICKBACKUP_LOG_LEVEL")
    if os.getenv("QUICKBACKUP_COMPRESS_LEVEL"):
        archive.compress_level = int(os.getenv("QUICKBACKUP_COMPRESS_LEVEL"))

    archive.compress_level = int(archive.compress_level)
    if not 0 <= archive.compress_level <= 9:
        raise ValueError(
            f"`archive.compress_level` must be between 0 and 9, got {archive.compress_level}"
        )
    log.level = str(log.level).upper()

    return Settings(archive=archive, logging=log)


def preview_settings(settings: Settings) -> str:
    """
    One-line summary of the effective config for debug logging at startup.
    """
    a = settings.archive
    return (
        f"compress_level={a.compress_level} sort_entries={a.sort_entries} "
        f"verify_copy={a.verify_copy} exclusions_encoding={a.exclusions_encoding} "
        f"log_level={settings.logging.level}"
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "ArchiveSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
    "preview_settings",
]
