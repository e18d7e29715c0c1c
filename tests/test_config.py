from pathlib import Path

import pytest
from pydantic import ValidationError

from hodograph_editor import (
    EditorConfig,
    RoundingPolicy,
    get_settings,
    load_editor_config,
    reset_settings_cache,
    resolve_editor_config,
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HODOGRAPH_CONFIG_PATH", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_preserve_reference_constants() -> None:
    config = EditorConfig()
    assert config.picking.hit_tolerance_px == 10
    assert config.curve.steps == 10000
    assert config.curve.rounding is RoundingPolicy.ROUND
    assert config.markers.selected_size > config.markers.point_size


def test_yaml_overrides_merge_with_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "editor.yaml",
        "curve:\n  steps: 500\n  rounding: truncate\npicking:\n  hit_tolerance_px: 4\n",
    )
    config = load_editor_config(path)
    assert config.curve.steps == 500
    assert config.curve.rounding is RoundingPolicy.TRUNCATE
    assert config.picking.hit_tolerance_px == 4
    assert config.window.width == 800


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    config = load_editor_config(_write(tmp_path / "empty.yaml", ""))
    assert config == EditorConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_editor_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "curve:\n  steps: 0\n",
        "curve:\n  rounding: ceil\n",
        "markers:\n  point_size: 8\n  selected_size: 4\n",
        "window:\n  title: '  '\n",
    ],
)
def test_invalid_values_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValidationError):
        load_editor_config(_write(tmp_path / "bad.yaml", text))


def test_environment_selects_config_file(tmp_path: Path, monkeypatch) -> None:
    path = _write(tmp_path / "env.yaml", "hodograph:\n  offset: [10, 20]\n")
    monkeypatch.setenv("HODOGRAPH_CONFIG_PATH", str(path))
    reset_settings_cache()

    assert get_settings().config_path == path.resolve()
    assert resolve_editor_config().hodograph.offset == (10.0, 20.0)


def test_resolve_without_file_uses_defaults() -> None:
    assert resolve_editor_config() == EditorConfig()


def test_log_level_is_validated(monkeypatch) -> None:
    monkeypatch.setenv("HODOGRAPH_LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"

    reset_settings_cache()
    monkeypatch.setenv("HODOGRAPH_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        get_settings()


def test_window_title_is_stripped(tmp_path: Path) -> None:
    config = load_editor_config(_write(tmp_path / "title.yaml", "window:\n  title: '  Curves  '\n"))
    assert config.window.title == "Curves"
    assert EditorConfig.model_validate({"window": {"title": " Editor "}}).window.title == "Editor"
