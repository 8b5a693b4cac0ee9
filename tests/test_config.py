from pathlib import Path

import pytest

from quickbackup.config import CONFIG_ENV_VAR, Settings, load_settings, preview_settings

DEFAULT_YAML = Path(__file__).resolve().parents[1] / "config" / "default.yaml"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (CONFIG_ENV_VAR, "QUICKBACKUP_LOG_LEVEL", "QUICKBACKUP_COMPRESS_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults_without_file():
    settings = load_settings()

    assert settings == Settings()
    assert settings.archive.compress_level == 9
    assert settings.archive.sort_entries is True
    assert settings.logging.level == "INFO"


def test_shipped_default_yaml_matches_builtin_defaults():
    assert load_settings(DEFAULT_YAML) == Settings()


def test_yaml_values_and_unknown_keys(tmp_path):
    p = tmp_path / "qb.yaml"
    p.write_text(
        "archive:\n"
        "  compress_level: 3\n"
        "  sort_entries: false\n"
        "  future_option: 1\n"
        "logging:\n"
        "  level: debug\n"
        "unknown_section: {}\n",
        encoding="utf-8",
    )

    settings = load_settings(p)

    assert settings.archive.compress_level == 3
    assert settings.archive.sort_entries is False
    assert settings.archive.verify_copy is True
    assert settings.logging.level == "DEBUG"


def test_env_var_points_at_file(tmp_path, monkeypatch):
    p = tmp_path / "qb.yaml"
    p.write_text("archive:\n  verify_copy: false\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(p))

    assert load_settings().archive.verify_copy is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("QUICKBACKUP_LOG_LEVEL", "warning")
    monkeypatch.setenv("QUICKBACKUP_COMPRESS_LEVEL", "1")

    settings = load_settings()

    assert settings.logging.level == "WARNING"
    assert settings.archive.compress_level == 1


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_compress_level_out_of_range(tmp_path):
    p = tmp_path / "qb.yaml"
    p.write_text("archive:\n  compress_level: 12\n", encoding="utf-8")

    with pytest.raises(ValueError, match="compress_level"):
        load_settings(p)


def test_empty_yaml_is_defaults(tmp_path):
    p = tmp_path / "qb.yaml"
    p.write_text("", encoding="utf-8")

    assert load_settings(p) == Settings()


def test_preview_settings():
    text = preview_settings(Settings())

    assert "compress_level=9" in text
    assert "log_level=INFO" in text
