"""Shared fixtures for quickbackup tests."""
import logging
import zipfile
from pathlib import Path

import pytest


def make_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (relative path -> text content) under root."""
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


def zip_names(archive: Path) -> set[str]:
    with zipfile.ZipFile(archive) as zf:
        return set(zf.namelist())


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    Small project tree used by most tests:

        myproject/
            a.txt
            notes.md
            secret/b.txt
            node_modules/x.js
            src/app.py
            src/cache.tmp
    """
    root = tmp_path / "myproject"
    root.mkdir()
    return make_tree(
        root,
        {
            "a.txt": "alpha",
            "notes.md": "# notes",
            "secret/b.txt": "beta",
            "node_modules/x.js": "console.log(1)",
            "src/app.py": "print('hi')",
            "src/cache.tmp": "junk",
        },
    )


@pytest.fixture
def exclusions_file(tmp_path: Path) -> Path:
    p = tmp_path / "exclusions.txt"
    p.write_text("^secret$\nnode_modules\n", encoding="utf-8")
    return p


@pytest.fixture
def backups(tmp_path: Path) -> Path:
    """Primary backup location (not created up front)."""
    return tmp_path / "backups"


@pytest.fixture
def tree():
    """Factory fixture: tree(root, {"rel/path": "content"})."""
    return make_tree


@pytest.fixture
def read_names():
    """Return the entry names stored in a zip archive."""
    return zip_names


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging() so tests stay isolated."""
    yield
    logger = logging.getLogger("quickbackup")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
