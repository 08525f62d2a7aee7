"""Test configuration management."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from cuemeta.config.config import ITEM_SEPARATOR_DEFAULT, Config
from cuemeta.config.paths import default_config_path


@pytest.fixture(autouse=True)
def fresh_singleton(portable_repo_root: Path) -> Iterator[Path]:
    """Isolate every test from the process-wide configuration instance."""
    original = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    yield portable_repo_root
    Config._instance = original  # pyright: ignore[reportPrivateUsage]


def test_default_config(portable_repo_root: Path) -> None:
    """Test default configuration creation at portable repo location."""
    config = Config()
    assert config.log_file is None
    assert config.item_separator == ITEM_SEPARATOR_DEFAULT
    assert config.resolve_case_insensitive is True

    config.save()
    assert default_config_path() == portable_repo_root / "config" / "config.toml"
    assert default_config_path().exists()


def test_load_creates_default_file_when_missing() -> None:
    loaded = Config.load()

    assert default_config_path().exists()
    assert loaded.item_separator == ITEM_SEPARATOR_DEFAULT


def test_save_load_toml() -> None:
    """Test saving and loading configuration in TOML format."""
    original_config = Config(
        log_file=Path("/test/logs/cuemeta.log"),
        item_separator="; ",
        resolve_case_insensitive=False,
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/cuemeta.log")
    assert loaded_config.item_separator == "; "
    assert loaded_config.resolve_case_insensitive is False


def test_empty_separator_round_trips() -> None:
    Config(item_separator="").save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    assert Config.load().item_separator == ""


def test_load_ignores_unknown_keys_and_blank_log_file() -> None:
    path = default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(
        'log_file = "  "\nbase_path = "/music"\n', encoding="utf-8"
    )

    loaded = Config.load()

    assert loaded.log_file is None
    assert loaded.item_separator == ITEM_SEPARATOR_DEFAULT
    assert not hasattr(loaded, "base_path")


def test_singleton_behavior() -> None:
    """Test singleton pattern behavior with fixed repo path."""
    config1 = Config.load()
    config1.item_separator = ", "
    config1.save()

    config2 = Config.load()
    assert config2 is config1
    assert config2.item_separator == ", "


def test_toml_comments() -> None:
    """Test TOML file contains comments."""
    Config(item_separator='a"b').save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# cuemeta Configuration File" in content
    assert "# Log file path" in content
    assert 'item_separator = "a\\"b"' in content
