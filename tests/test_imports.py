"""Dynamic import validation for all quickbackup modules.

Uses pkgutil.walk_packages for automatic discovery of the modules to test.
"""
import importlib
import pkgutil
from pathlib import Path

import pytest


def discover_package_modules(package_name: str, package_path: Path) -> list[str]:
    """Discover all modules in a package recursively.

    Args:
        package_name: Fully qualified package name (e.g., 'quickbackup.archive')
        package_path: Filesystem path to package directory

    Returns:
        Sorted module names (e.g., ['quickbackup.archive.collect', ...])
    """
    modules = []
    for info in pkgutil.walk_packages([str(package_path)], prefix=f"{package_name}."):
        modules.append(info.name)
    return sorted(modules)


PROJECT_ROOT = Path(__file__).parent.parent
SRC_PATH = PROJECT_ROOT / "src"

# __main__ runs the CLI on import
QUICKBACKUP_MODULES = [
    m
    for m in discover_package_modules("quickbackup", SRC_PATH / "quickbackup")
    if not m.endswith(".__main__")
]


def test_modules_discovered():
    assert "quickbackup.archive.collect" in QUICKBACKUP_MODULES
    assert "quickbackup.cli" in QUICKBACKUP_MODULES


@pytest.mark.parametrize("module_name", QUICKBACKUP_MODULES)
def test_quickbackup_module_import(module_name):
    """Test that each quickbackup module can be imported."""
    try:
        importlib.import_module(module_name)
    except ImportError as e:
        pytest.fail(f"Failed to import {module_name}: {e}")


def test_public_api():
    import quickbackup
    import quickbackup.archive

    assert callable(quickbackup.run_backup)
    assert issubclass(quickbackup.ExclusionsFileNotFoundError, quickbackup.BackupError)
    for name in quickbackup.archive.__all__:
        assert hasattr(quickbackup.archive, name)
