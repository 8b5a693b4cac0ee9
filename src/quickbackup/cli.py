# src/quickbackup/cli.py
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from quickbackup import __version__
from quickbackup.config import load_settings, preview_settings
from quickbackup.exceptions import BackupError, ExclusionsFileNotFoundError
from quickbackup.logging_config import add_logging_args, setup_logging
from quickbackup.pipeline import run_backup

logger = logging.getLogger(__name__)

PROG = "quickbackup"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Zip the current directory (minus excluded names) into "
            "<primary>/<folder name>/<archive>.zip, optionally mirroring it "
            "to a secondary location."
        ),
    )
    p.add_argument("archive_name", help="Archive file name ('.zip' appended if missing).")
    p.add_argument("exclusions_file", help="Text file, one regular expression per line.")
    p.add_argument("primary_backup_folder", help="Primary backup location.")
    p.add_argument(
        "secondary_backup_folder",
        nargs="?",
        default=None,
        help="Optional secondary location; copy failures only warn.",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Optional YAML settings file (default: $QUICKBACKUP_CONFIG).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_logging_args(p)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for `quickbackup` / `backup`.

    Exit codes:
      0  archive written (secondary copy failures do not count)
      1  exclusions file missing, bad pattern or bad settings
      2  usage error (raised by argparse as SystemExit)
    """
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        parser.print_usage()
        print(f"{PROG}: error: {e}")
        return 1

    log = settings.logging
    setup_logging(
        level=args.log_level or log.level,
        log_file=args.log_file or log.file,
        quiet=args.quiet or log.quiet,
        debug=args.debug or log.debug,
    )
    logger.debug(f"Settings: {preview_settings(settings)}")

    try:
        result = run_backup(
            args.archive_name,
            args.exclusions_file,
            args.primary_backup_folder,
            args.secondary_backup_folder,
            settings=settings,
        )
    except ExclusionsFileNotFoundError as e:
        logger.error(str(e))
        return 1
    except BackupError as e:
        logger.error(f"Backup aborted: {e}")
        return 1

    logger.debug(str(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
