from __future__ import annotations

import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

pytest.importorskip("yaml")

from dashboard.config import CONFIG_ENV_VAR, AppConfig, ConfigError, load_config, resolve_config_path


def test_missing_file_yields_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    assert config == AppConfig()
    assert config.preview_rows == 10
    assert config.max_upload_mb == 10


def test_values_are_read_and_cast(tmp_path):
    path = tmp_path / "chartify.yaml"
    path.write_text("title: Sales\npreview_rows: '25'\nexport_scale: 3\n", encoding="utf-8")

    config = load_config(path)

    assert config.title == "Sales"
    assert config.preview_rows == 25
    assert config.image_options() == {"width": 1000, "height": 500, "scale": 3}


def test_empty_file_yields_defaults(tmp_path):
    path = tmp_path / "chartify.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AppConfig()


@pytest.mark.parametrize(
    "text",
    [
        "unknown_key: 1\n",
        "preview_rows: many\n",
        "preview_rows: 0\n",
        "- just\n- a list\n",
        "title: [unclosed\n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path, text):
    path = tmp_path / "chartify.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_resolve_config_path_prefers_environment(monkeypatch, tmp_path):
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
    assert resolve_config_path() == target

    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert resolve_config_path(tmp_path) == tmp_path / "chartify.yaml"


def test_preferences_path_is_expanded():
    config = AppConfig(preferences_path="~/prefs.json")
    assert "~" not in str(config.preferences_file)
